"""ToolBank Health Metrics.

Unit-aware BMI, calorie (BMR/TDEE) and water intake calculators.
"""
from toolbank.core.errors import InvalidInput
from toolbank.tools import (
    calculate_bmi,
    calculate_calories,
    calculate_water_intake,
    build_health_snapshot,
)

__version__ = "1.0.0"

__all__ = [
    "InvalidInput",
    "calculate_bmi",
    "calculate_calories",
    "calculate_water_intake",
    "build_health_snapshot",
]
