"""ToolBank Data Models.

This module contains the enumerations and immutable value objects used by the
health calculators.

Models:
    UnitSystem, Sex, ActivityLevel, WaterActivityLevel, Climate: Input categories.
    AnthropometricInput: Body measurements as entered.
    BMIResult, CalorieResult, WaterIntakeResult: Calculator outputs.
"""
from toolbank.models.health import (
    UnitSystem,
    Sex,
    ActivityLevel,
    WaterActivityLevel,
    Climate,
    AnthropometricInput,
    HealthyWeightRange,
    BMIResult,
    WeightLossTargets,
    WeightGainTargets,
    CalorieResult,
    WaterIntakeResult,
)

__all__ = [
    "UnitSystem",
    "Sex",
    "ActivityLevel",
    "WaterActivityLevel",
    "Climate",
    "AnthropometricInput",
    "HealthyWeightRange",
    "BMIResult",
    "WeightLossTargets",
    "WeightGainTargets",
    "CalorieResult",
    "WaterIntakeResult",
]
