from typing import Any


class InvalidInput(ValueError):
    """Raised when a calculator receives a value it cannot work with."""

    def __init__(self, field: str, value: Any, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}={value!r}: {reason}")
