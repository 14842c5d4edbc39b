from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when a pricing operation receives a value it cannot accept."""

    name: str
    value: Any

    def __init__(self, name: str, value: Any, message: str) -> None:
        self.name = name
        self.value = value
        super().__init__(message)

    @classmethod
    def negative(cls, name: str, value: float) -> "InvalidArgumentError":
        return cls(name, value, f"{name} must not be negative: {float(value)}")

    @classmethod
    def not_positive(cls, name: str, value: float) -> "InvalidArgumentError":
        return cls(name, value, f"{name} must be positive: {float(value)}")
