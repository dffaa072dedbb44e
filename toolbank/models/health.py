from typing import Dict, Any
from dataclasses import dataclass, asdict
from enum import Enum


class UnitSystem(Enum):
    METRIC = "metric"        # kg / cm
    IMPERIAL = "imperial"    # lb / in


class Sex(Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity tiers for calorie (TDEE) calculations."""
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class WaterActivityLevel(Enum):
    """Activity tiers for the water intake calculator."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class Climate(Enum):
    NORMAL = "normal"
    HOT = "hot"
    HUMID = "humid"


@dataclass(frozen=True)
class AnthropometricInput:
    """Body measurements as entered, in the units of ``unit_system``."""
    weight: float
    height: float
    age: int
    sex: Sex
    unit_system: UnitSystem = UnitSystem.METRIC


@dataclass(frozen=True)
class HealthyWeightRange:
    min: int
    max: int


@dataclass(frozen=True)
class BMIResult:
    bmi: float
    category: str
    description: str
    healthy_weight_range: HealthyWeightRange

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WeightLossTargets:
    mild: int
    moderate: int
    aggressive: int


@dataclass(frozen=True)
class WeightGainTargets:
    mild: int
    moderate: int


@dataclass(frozen=True)
class CalorieResult:
    """Daily energy figures, all in kcal."""
    bmr: int
    tdee: int
    weight_loss: WeightLossTargets
    weight_gain: WeightGainTargets

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class WaterIntakeResult:
    """Recommended daily intake, the same amount in three units."""
    liters: float
    cups: float
    ounces: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
