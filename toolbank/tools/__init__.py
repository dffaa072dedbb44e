"""ToolBank Tools Module.

This module contains the deterministic health calculators.

Tools:
    calculate_bmi: Body Mass Index with category and healthy weight range.
    calculate_calories: BMR, TDEE and weight loss/gain calorie targets.
    calculate_water_intake: Daily water target in liters, cups and ounces.
    build_health_snapshot: Run all calculators over one profile dict.
    bmi_category: Classify a BMI value.
"""
from toolbank.tools.health_metrics import (
    calculate_bmi,
    calculate_calories,
    calculate_water_intake,
    build_health_snapshot,
    bmi_category,
    bmi_description,
)

__all__ = [
    "calculate_bmi",
    "calculate_calories",
    "calculate_water_intake",
    "build_health_snapshot",
    "bmi_category",
    "bmi_description",
]
