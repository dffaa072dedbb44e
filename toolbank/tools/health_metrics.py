import math
import logging
from typing import Any, Dict, Optional, Tuple

from toolbank.config import settings
from toolbank.core.errors import InvalidInput
from toolbank.core.observability import trace_calculation
from toolbank.models.health import (
    ActivityLevel,
    AnthropometricInput,
    BMIResult,
    CalorieResult,
    Climate,
    HealthyWeightRange,
    Sex,
    UnitSystem,
    WaterActivityLevel,
    WaterIntakeResult,
    WeightGainTargets,
    WeightLossTargets,
)
from toolbank.tools.validation import (
    parse_choice,
    validate_age,
    validate_anthropometrics,
    validate_positive,
)

logger = logging.getLogger(__name__)


# ============================================================================
# LOOKUP TABLES
# ============================================================================

# (upper bound, exclusive; category; description), checked in order
BMI_CATEGORIES = (
    (18.5, "Underweight",
     "You may be underweight. Consider consulting with a healthcare provider."),
    (25.0, "Normal weight",
     "You have a healthy weight for your height."),
    (30.0, "Overweight",
     "You may be overweight. Consider a balanced diet and regular exercise."),
    (math.inf, "Obese",
     "You may be obese. Consider consulting with a healthcare provider for guidance."),
)

HEALTHY_BMI_RANGE = (18.5, 24.9)

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# Mifflin-St Jeor sex constant
BMR_SEX_OFFSET = {
    Sex.MALE: 5,
    Sex.FEMALE: -161,
}

WEIGHT_LOSS_OFFSETS = {"mild": 250, "moderate": 500, "aggressive": 750}
WEIGHT_GAIN_OFFSETS = {"mild": 250, "moderate": 500}

WATER_ML_PER_KG = 35

WATER_ACTIVITY_MULTIPLIERS = {
    WaterActivityLevel.LOW: 1.0,
    WaterActivityLevel.MODERATE: 1.2,
    WaterActivityLevel.HIGH: 1.5,
}

CLIMATE_MULTIPLIERS = {
    Climate.NORMAL: 1.0,
    Climate.HOT: 1.2,
    Climate.HUMID: 1.15,
}


# ============================================================================
# HELPERS
# ============================================================================

def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves towards +infinity, the way the published calculators do.

    Python's round() uses banker's rounding, which would turn 12.25 cups
    into 12.2 instead of 12.3.
    """
    if digits == 0:
        return int(math.floor(value + 0.5))
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _resolve_unit_system(unit_system) -> UnitSystem:
    if unit_system is None:
        unit_system = settings.DEFAULT_UNIT_SYSTEM
    return parse_choice(UnitSystem, unit_system, "unit_system")


def _weight_to_kg(weight: float, unit_system: UnitSystem) -> float:
    if unit_system is UnitSystem.IMPERIAL:
        return weight * settings.LB_TO_KG
    return weight


def _height_to_cm(height: float, unit_system: UnitSystem) -> float:
    if unit_system is UnitSystem.IMPERIAL:
        return height * settings.INCH_TO_CM
    return height


def _height_to_m(height: float, unit_system: UnitSystem) -> float:
    return _height_to_cm(height, unit_system) / 100


def _kg_to_unit(weight_kg: float, unit_system: UnitSystem) -> float:
    if unit_system is UnitSystem.IMPERIAL:
        return weight_kg * settings.KG_TO_LB
    return weight_kg


# ============================================================================
# BMI
# ============================================================================

def _classify_bmi(bmi: float) -> Tuple[str, str]:
    for upper, category, description in BMI_CATEGORIES:
        if bmi < upper:
            return category, description
    # NaN is the only value that falls through
    raise InvalidInput("bmi", bmi, "must be a number")


def bmi_category(bmi: float) -> str:
    """
    Classify a BMI value (WHO adult categories).

    Thresholds: <18.5 Underweight, [18.5, 25) Normal weight,
    [25, 30) Overweight, >=30 Obese.
    """
    return _classify_bmi(bmi)[0]


def bmi_description(bmi: float) -> str:
    return _classify_bmi(bmi)[1]


def healthy_weight_range(height_m: float, unit_system: UnitSystem) -> HealthyWeightRange:
    """Weights giving a BMI of 18.5-24.9 at ``height_m``, in the caller's unit."""
    low_bmi, high_bmi = HEALTHY_BMI_RANGE
    min_kg = low_bmi * height_m ** 2
    max_kg = high_bmi * height_m ** 2
    return HealthyWeightRange(
        min=round_half_up(_kg_to_unit(min_kg, unit_system)),
        max=round_half_up(_kg_to_unit(max_kg, unit_system)),
    )


@trace_calculation
def calculate_bmi(weight: float, height: float, unit_system=None) -> BMIResult:
    """
    Calculate Body Mass Index (BMI).

    Args:
        weight: Body weight in kg (metric) or lb (imperial).
        height: Height in cm (metric) or inches (imperial).
        unit_system: "metric" or "imperial"; defaults to the configured system.

    Returns:
        BMIResult with the BMI rounded to one decimal place and the healthy
        weight range in the same unit system as the input.

    Raises:
        InvalidInput: non-positive or out-of-range measurements, unknown unit system.
    """
    units = _resolve_unit_system(unit_system)
    weight = validate_positive(weight, "weight", settings.WEIGHT_BOUNDS)
    height = validate_positive(height, "height", settings.HEIGHT_BOUNDS)

    weight_kg = _weight_to_kg(weight, units)
    height_m = _height_to_m(height, units)
    bmi = weight_kg / (height_m ** 2)

    category, description = _classify_bmi(bmi)
    return BMIResult(
        bmi=round_half_up(bmi, 1),
        category=category,
        description=description,
        healthy_weight_range=healthy_weight_range(height_m, units),
    )


# ============================================================================
# CALORIES (BMR / TDEE)
# ============================================================================

def calc_bmr_mifflin(person: AnthropometricInput) -> float:
    """
    Mifflin-St Jeor BMR formula, unrounded kcal/day.

        male:   10*kg + 6.25*cm - 5*age + 5
        female: 10*kg + 6.25*cm - 5*age - 161
    """
    weight_kg = _weight_to_kg(person.weight, person.unit_system)
    height_cm = _height_to_cm(person.height, person.unit_system)
    return 10 * weight_kg + 6.25 * height_cm - 5 * person.age + BMR_SEX_OFFSET[person.sex]


@trace_calculation
def calculate_calories(
    weight: float,
    height: float,
    age: int,
    sex,
    activity_level,
    unit_system=None,
) -> CalorieResult:
    """
    Calculate BMR, TDEE and daily calorie targets for losing or gaining weight.

    activity_level:
        'sedentary', 'light', 'moderate', 'active', 'very_active'

    All targets are derived from the unrounded TDEE and rounded to whole kcal.
    """
    person = AnthropometricInput(
        weight=validate_positive(weight, "weight", settings.WEIGHT_BOUNDS),
        height=validate_positive(height, "height", settings.HEIGHT_BOUNDS),
        age=validate_age(age),
        sex=parse_choice(Sex, sex, "sex"),
        unit_system=_resolve_unit_system(unit_system),
    )
    activity = parse_choice(ActivityLevel, activity_level, "activity_level")

    bmr = calc_bmr_mifflin(person)
    tdee = bmr * ACTIVITY_MULTIPLIERS[activity]

    return CalorieResult(
        bmr=round_half_up(bmr),
        tdee=round_half_up(tdee),
        weight_loss=WeightLossTargets(
            **{goal: round_half_up(tdee - kcal) for goal, kcal in WEIGHT_LOSS_OFFSETS.items()}
        ),
        weight_gain=WeightGainTargets(
            **{goal: round_half_up(tdee + kcal) for goal, kcal in WEIGHT_GAIN_OFFSETS.items()}
        ),
    )


# ============================================================================
# WATER INTAKE
# ============================================================================

@trace_calculation
def calculate_water_intake(
    weight: float,
    activity_level,
    climate,
    unit_system=None,
) -> WaterIntakeResult:
    """
    Daily water intake: 35 ml per kg, scaled for activity and climate.

    Not medical advice. The same total is reported in liters, US cups
    (240 ml) and fluid ounces (29.5735 ml), each to one decimal place.
    """
    units = _resolve_unit_system(unit_system)
    weight = validate_positive(weight, "weight", settings.WEIGHT_BOUNDS)
    activity = parse_choice(WaterActivityLevel, activity_level, "activity_level")
    climate = parse_choice(Climate, climate, "climate")

    base_ml = _weight_to_kg(weight, units) * WATER_ML_PER_KG
    total_ml = base_ml * WATER_ACTIVITY_MULTIPLIERS[activity] * CLIMATE_MULTIPLIERS[climate]

    return WaterIntakeResult(
        liters=round_half_up(total_ml / 1000, 1),
        cups=round_half_up(total_ml / settings.ML_PER_CUP, 1),
        ounces=round_half_up(total_ml / settings.ML_PER_OUNCE, 1),
    )


# ============================================================================
# SNAPSHOT
# ============================================================================

def build_health_snapshot(profile: Dict[str, Any]) -> Dict[str, Optional[Dict[str, Any]]]:
    """
    Run every calculator the profile has enough data for.

    Expects:
        profile = {
            "weight": float,
            "height": float,
            "age": int,
            "sex": "male" | "female",
            "activity_level": "sedentary" | "light" | "moderate" | "active" | "very_active",
            "water_activity_level": "low" | "moderate" | "high",
            "climate": "normal" | "hot" | "humid",
            "unit_system": "metric" | "imperial",
        }

    Sections whose inputs are missing come back as None. Values that are
    present but invalid raise InvalidInput.
    """
    weight, height, age = validate_anthropometrics(
        weight=profile.get("weight"),
        height=profile.get("height"),
        age=profile.get("age"),
    )
    sex = profile.get("sex")
    activity_level = profile.get("activity_level")
    unit_system = profile.get("unit_system")

    snapshot = {"bmi": None, "calories": None, "water": None}

    if weight is not None and height is not None:
        snapshot["bmi"] = calculate_bmi(weight, height, unit_system).to_dict()

    if None not in (weight, height, age, sex, activity_level):
        snapshot["calories"] = calculate_calories(
            weight, height, age, sex, activity_level, unit_system
        ).to_dict()

    if weight is not None:
        snapshot["water"] = calculate_water_intake(
            weight,
            profile.get("water_activity_level") or WaterActivityLevel.MODERATE,
            profile.get("climate") or Climate.NORMAL,
            unit_system,
        ).to_dict()

    missing = [name for name, section in snapshot.items() if section is None]
    if missing:
        logger.info(f"Snapshot skipped {missing}: not enough profile data")
    return snapshot
