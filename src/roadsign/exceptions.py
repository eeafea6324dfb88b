"""Engine level exceptions and validation helpers."""

from __future__ import annotations

from typing import Any, Mapping

__all__ = [
    "EngineError",
    "InvalidDateError",
    "InvalidTimeError",
    "InvalidPayloadError",
    "ensure_field",
]


class EngineError(Exception):
    """Base class for engine specific errors."""


class InvalidDateError(EngineError, ValueError):
    """Raised when a calendar date cannot be parsed or normalized."""

    def __init__(self, value: object) -> None:
        super().__init__(f"invalid date value: {value!r}")
        self.value = value


class InvalidTimeError(EngineError, ValueError):
    """Raised when a wall-clock time is not a valid ``HH:mm`` string."""

    def __init__(self, value: object) -> None:
        super().__init__(f"invalid time value: {value!r} (expected HH:mm)")
        self.value = value


class InvalidPayloadError(EngineError, ValueError):
    """Raised when an upstream payload misses mandatory fields."""


def ensure_field(payload: Mapping[str, Any], *keys: str, entity: str) -> Any:
    """Return the first non-empty value among ``keys`` or raise.

    Upstream payloads are not consistent about naming (``product_id`` versus
    ``productId``), so callers list every accepted alias.
    """

    for key in keys:
        value = payload.get(key)
        if value is not None and value != "":
            return value
    raise InvalidPayloadError(f"{entity}: missing required field '{keys[0]}'")
