# main.py
from flask import Flask, request, render_template_string
import logging, os

from bmi_engine import BMI_SCALE, CATEGORY_INFO, CalculatorState

app = Flask(__name__)


def log_level(name):
    # unknown names fall back to INFO
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


app.logger.setLevel(log_level(os.environ.get("LOG_LEVEL", "INFO")))

PAGE = """
<!doctype html>
<html lang="uz">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>BMI Kalkulyatori</title>
  <style>
    :root {
      --bg: #f4f8fb;
      --card: #ffffff;
      --muted: #6b7a8c;
      --primary: #14a38b;
      --text: #1c2733;
      --underweight: #3b82f6;
      --normal: #22c55e;
      --overweight: #f59e0b;
      --obese: #ef4444;
    }
    * { box-sizing: border-box; }
    body {
      margin: 0;
      min-height: 100vh;
      display: flex; align-items: center; justify-content: center;
      font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Arial;
      background: linear-gradient(135deg, #f4f8fb 0%, #e6f4f1 60%, #eef3fb 100%);
      color: var(--text);
    }
    .wrap { width: 100%; max-width: 448px; padding: 16px; }
    .header { text-align: center; margin-bottom: 24px; }
    .badge {
      width: 64px; height: 64px; margin: 0 auto 16px;
      border-radius: 999px; display: flex; align-items: center; justify-content: center;
      background: linear-gradient(135deg, #14a38b, #3b82f6); color: #fff; font-size: 28px;
    }
    h1 { margin: 0 0 8px 0; font-weight: 700; color: var(--primary); }
    p.muted { color: var(--muted); margin-top: 0; }
    .card {
      background: var(--card);
      border-radius: 16px;
      padding: 24px;
      margin-bottom: 24px;
      box-shadow: 0 10px 30px #1c27331a;
    }
    .card h2 { margin: 0 0 4px 0; font-size: 18px; }
    .field { margin-top: 16px; }
    .label { font-size: 13px; font-weight: 600; margin-bottom: 6px; display: block; }
    input[type="number"]{
      width: 100%;
      font-size: 16px;
      padding: 10px 12px;
      border-radius: 8px;
      border: 1px solid #d5dde6;
      background: #fbfdff;
      color: var(--text);
      outline: none;
    }
    .buttons { margin-top: 20px; display: flex; gap: 8px; }
    button {
      padding: 12px 16px;
      border-radius: 10px;
      border: 1px solid #d5dde6;
      background: #fff;
      color: var(--text);
      cursor: pointer;
      font-weight: 600;
    }
    button.primary { flex: 1; background: linear-gradient(135deg, #14a38b, #3b82f6); border: 0; color: #fff; }
    button:disabled { opacity: 0.6; cursor: not-allowed; }
    .bmi { text-align: center; font-size: 40px; font-weight: 700; color: var(--primary); }
    .category { text-align: center; font-size: 18px; font-weight: 600; margin-top: 4px; }
    .advice { margin-top: 16px; padding: 16px; border-radius: 12px; background: #f4f8fb; }
    .advice h4 { margin: 0 0 6px 0; }
    .advice p { margin: 0; font-size: 14px; color: var(--muted); line-height: 1.5; }
    .scale { margin-top: 16px; }
    .scale .caption { font-size: 12px; color: var(--muted); text-align: center; margin-bottom: 6px; }
    .strip { display: flex; height: 8px; border-radius: 999px; overflow: hidden; }
    .strip div { flex: 1; }
    .ticks { display: flex; justify-content: space-between; font-size: 12px; color: var(--muted); margin-top: 4px; }
    .text-underweight { color: var(--underweight); }
    .text-normal { color: var(--normal); }
    .text-overweight { color: var(--overweight); }
    .text-obese { color: var(--obese); }
    .bg-underweight { background: var(--underweight); }
    .bg-normal { background: var(--normal); }
    .bg-overweight { background: var(--overweight); }
    .bg-obese { background: var(--obese); }
  </style>
</head>
<body>
  <div class="wrap">
    <div class="header">
      <div class="badge">&#8721;</div>
      <h1>BMI Kalkulyatori</h1>
      <p class="muted">Tana massasi indeksini hisoblang va sog'ligingizni kuzating</p>
    </div>

    <div class="card">
      <h2>Ma'lumotlarni kiriting</h2>
      <p class="muted">Bo'y va vaznni to'g'ri kiriting</p>

      <form id="calcForm" method="POST" novalidate>
        <div class="field">
          <label class="label" for="height">Bo'y (sm)</label>
          <input type="number" id="height" name="height" step="any" placeholder="Masalan: 170" value="{{ state.height }}" inputmode="decimal">
        </div>
        <div class="field">
          <label class="label" for="weight">Vazn (kg)</label>
          <input type="number" id="weight" name="weight" step="any" placeholder="Masalan: 70" value="{{ state.weight }}" inputmode="decimal">
        </div>

        <div class="buttons">
          <button type="submit" id="submitBtn" name="action" value="calculate" class="primary">Hisoblash</button>
          {% if state.has_result %}
            <button type="submit" id="resetBtn" name="action" value="reset">Tozalash</button>
          {% endif %}
        </div>
      </form>
    </div>

    {% if state.has_result %}
      {% set result = state.result %}
      <div class="card result">
        <h2>Natija</h2>
        <div class="bmi">{{ "%.1f"|format(result.bmi) }}</div>
        <div class="category {{ result.color }}">{{ result.label }}</div>

        <div class="advice">
          <h4>Tavsiya:</h4>
          <p>{{ result.advice }}</p>
        </div>

        <div class="scale">
          <div class="caption">BMI shkalasi</div>
          <div class="strip">
            {% for category, _ in scale %}<div class="bg-{{ category.value }}" title="{{ categories[category].label }}"></div>{% endfor %}
          </div>
          <div class="ticks">
            {% for _, caption in scale %}<span>{{ caption }}</span>{% endfor %}
          </div>
        </div>
      </div>
    {% endif %}
  </div>

  <script>
    const submitBtn = document.getElementById('submitBtn');
    const numberRe = /^[+-]?(?:[0-9]+(?:[.][0-9]*)?|[.][0-9]+)(?:[eE][+-]?[0-9]+)?$/;

    function isPositive(id){
      const el = document.getElementById(id);
      const s = el ? el.value.trim() : "";
      if(!numberRe.test(s)) return false;
      const v = Number(s);
      return Number.isFinite(v) && v > 0;
    }

    function markValidity(){
      submitBtn.disabled = !(isPositive('height') && isPositive('weight'));
    }

    // numeric guards
    document.querySelectorAll('input[type="number"]').forEach(inp => {
      inp.addEventListener('keydown', function(e){
        const allowed = ["Backspace","Tab","ArrowLeft","ArrowRight","Delete","Enter",".","Home","End"];
        if ((e.key >= "0" && e.key <= "9") || allowed.includes(e.key)) {
          if (e.key === "." && this.value.includes(".")) e.preventDefault();
          return;
        }
        if ((e.ctrlKey || e.metaKey) && ["a","c","v","x","z","y"].includes(e.key.toLowerCase())) return;
        e.preventDefault();
      });
      inp.addEventListener('input', markValidity);
    });

    markValidity();
  </script>
</body>
</html>
"""


def render(state):
    return render_template_string(PAGE, state=state, scale=BMI_SCALE, categories=CATEGORY_INFO)


@app.route("/", methods=["GET","POST"])
def index():
    state = CalculatorState(
        height=request.form.get("height", "").strip(),
        weight=request.form.get("weight", "").strip(),
    )

    if request.method == "GET":
        return render(state)

    action = request.form.get("action", "calculate")
    if action == "reset":
        state.reset()
        app.logger.debug("Calculator reset")
        return render(state)

    result = state.calculate()
    if result is None:
        # trigger is disabled client-side for bad input; just redraw the form
        app.logger.debug("Rejected input height=%r weight=%r", state.height, state.weight)
        return render(state)

    app.logger.info("BMI %.1f -> %s", result.bmi, result.category.value)
    return render(state)


if __name__ == "__main__":
    logging.basicConfig(level=app.logger.level)
    port = int(os.environ.get("PORT", 8080))
    app.run(host=os.environ.get("HOST", "0.0.0.0"), port=port)
