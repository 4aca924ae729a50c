# bmi_engine.py
"""BMI computation and category lookup used by the calculator page."""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional


# Plain decimal text, as an HTML number input submits it
NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# -------- Category cut points (kg/m^2) --------
UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0


class Category(str, Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


class CategoryInfo(NamedTuple):
    label: str
    advice: str
    color: str


CATEGORY_INFO = {
    Category.UNDERWEIGHT: CategoryInfo(
        label="Oziq-ovqat yetishmovchiligi",
        advice="Sog'lom va muvozanatli ovqatlanishni oshiring. Shifokor bilan maslahatlashing.",
        color="text-underweight",
    ),
    Category.NORMAL: CategoryInfo(
        label="Normal vazn",
        advice="Ajoyib! Sog'lom vazningizni saqlab qolish uchun faol turmush tarzini davom eting.",
        color="text-normal",
    ),
    Category.OVERWEIGHT: CategoryInfo(
        label="Ortiqcha vazn",
        advice="Sog'lom ovqatlanish va muntazam jismoniy mashqlar bilan vaznni kamaytirishga harakat qiling.",
        color="text-overweight",
    ),
    Category.OBESE: CategoryInfo(
        label="Semizlik",
        advice="Shifokor bilan maslahatlashib, vazn yo'qotish rejasini tuzing. Salomatligingiz uchun muhim!",
        color="text-obese",
    ),
}

# Scale strip under the result, in bin order
BMI_SCALE = (
    (Category.UNDERWEIGHT, "<18.5"),
    (Category.NORMAL, "18.5-24.9"),
    (Category.OVERWEIGHT, "25-29.9"),
    (Category.OBESE, "≥30"),
)


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    category: Category
    label: str
    advice: str
    color: str


def parse_positive(text) -> Optional[float]:
    """Parse form text into a finite number > 0, or None."""
    if text is None:
        return None
    s = str(text).strip()
    if not NUMBER_RE.fullmatch(s):
        return None
    value = float(s)
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def compute_bmi(height_cm: float, weight_kg: float) -> float:
    """
    BMI = weight_kg / (height_m)^2, with height_m = height_cm / 100.

    Both arguments must already be validated as positive. The value is not
    rounded; one decimal place is a display concern. Raises ValueError when
    the inputs are not positive or the magnitudes leave no finite positive
    BMI in double precision.
    """
    if height_cm <= 0 or weight_kg <= 0:
        raise ValueError("height_cm and weight_kg must be positive")
    height_m = height_cm / 100
    square = height_m * height_m
    if square == 0:
        raise ValueError(f"height_cm {height_cm!r} is too small to square")
    bmi = weight_kg / square
    if not math.isfinite(bmi) or bmi <= 0:
        raise ValueError(f"no finite BMI for height_cm={height_cm!r} weight_kg={weight_kg!r}")
    return bmi


def bmi_from_text(height, weight) -> Optional[float]:
    """BMI for raw form text, or None when the text is not a usable measurement."""
    height_cm = parse_positive(height)
    weight_kg = parse_positive(weight)
    if height_cm is None or weight_kg is None:
        return None
    try:
        return compute_bmi(height_cm, weight_kg)
    except ValueError:
        return None


def validate_inputs(height, weight) -> bool:
    return bmi_from_text(height, weight) is not None


def classify(bmi: float) -> Category:
    # lower bound of each bin is inclusive
    if bmi < UNDERWEIGHT_BELOW:
        return Category.UNDERWEIGHT
    if bmi < OVERWEIGHT_FROM:
        return Category.NORMAL
    if bmi < OBESE_FROM:
        return Category.OVERWEIGHT
    return Category.OBESE


def describe(bmi: float) -> BMIResult:
    category = classify(bmi)
    info = CATEGORY_INFO[category]
    return BMIResult(bmi=bmi, category=category, label=info.label, advice=info.advice, color=info.color)


def compute(height, weight) -> Optional[BMIResult]:
    """Validate the raw form text and build a result, or return None."""
    bmi = bmi_from_text(height, weight)
    if bmi is None:
        return None
    return describe(bmi)


@dataclass
class CalculatorState:
    """Transient form state: the entered text and the last result."""

    height: str = ""
    weight: str = ""
    result: Optional[BMIResult] = None

    @property
    def has_result(self) -> bool:
        return self.result is not None

    def calculate(self) -> Optional[BMIResult]:
        result = compute(self.height, self.weight)
        if result is not None:
            self.result = result
        return result

    def reset(self) -> None:
        self.height = ""
        self.weight = ""
        self.result = None
