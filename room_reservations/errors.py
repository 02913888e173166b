from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


class MissingValueError(TypeError):
    """A required argument was None."""


class InvalidArgumentError(ValueError):
    """A time slot duration or overlap count is out of range."""


class ReservationFormatError(ValueError):
    """Serialized reservation data could not be turned back into objects."""


def require(value: T | None, name: str) -> T:
    if value is None:
        raise MissingValueError(f"{name} must not be None")
    return value
