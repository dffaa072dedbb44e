"""Input validation for the health calculators.

Numbers must be finite and positive. With ``STRICT_BOUNDS`` enabled they must
also fall inside the limits the calculator forms accept.
"""
import math
from enum import Enum
from numbers import Real
from typing import Optional, Tuple, Type, TypeVar, Union

from toolbank.config import settings
from toolbank.core.errors import InvalidInput

E = TypeVar("E", bound=Enum)


def parse_choice(enum_cls: Type[E], value: Union[E, str, None], field: str) -> E:
    """
    Resolve ``value`` to a member of ``enum_cls``.

    Accepts the member itself or its string value (case-insensitive,
    surrounding whitespace ignored).
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(member.value for member in enum_cls)
    raise InvalidInput(field, value, f"expected one of: {allowed}")


def validate_positive(value, field: str, bounds: Optional[Tuple[float, float]] = None) -> float:
    """Return ``value`` as a float, rejecting non-numbers, NaN/inf and values <= 0."""
    # bool is an int subclass; True is not a weight.
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(field, value, "must be a number")

    value = float(value)
    if not math.isfinite(value):
        raise InvalidInput(field, value, "must be finite")
    if value <= 0:
        raise InvalidInput(field, value, "must be greater than 0")

    if bounds is not None and settings.STRICT_BOUNDS:
        low, high = bounds
        if value < low or value > high:
            raise InvalidInput(field, value, f"must be between {low} and {high}")
    return value


def validate_age(value) -> int:
    age = validate_positive(value, "age", settings.AGE_BOUNDS)
    if not age.is_integer():
        raise InvalidInput("age", value, "must be a whole number of years")
    return int(age)


def validate_anthropometrics(
    weight=None,
    height=None,
    age=None,
) -> Tuple[Optional[float], Optional[float], Optional[int]]:
    """
    Validate whichever of weight, height and age are given.

    Returns:
        (weight, height, age) normalised to float/float/int; arguments that
        were not supplied come back as None.
    """
    if weight is not None:
        weight = validate_positive(weight, "weight", settings.WEIGHT_BOUNDS)
    if height is not None:
        height = validate_positive(height, "height", settings.HEIGHT_BOUNDS)
    if age is not None:
        age = validate_age(age)
    return weight, height, age
