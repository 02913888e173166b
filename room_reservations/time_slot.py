from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from functools import total_ordering
from typing import Any, ClassVar

from .errors import InvalidArgumentError, MissingValueError, ReservationFormatError, require

MINUTES_OF_TOLERANCE_FOR_OVERLAPPING = 5
MAX_OVERLAP_MINUTES = 2**31 - 1
NO_OVERLAP = -1

_ONE_MINUTE = timedelta(minutes=1)


@total_ordering
@dataclass(frozen=True)
class TimeSlot:
    """A continuous, immutable interval of time between two instants.

    Slots that start and stop at the same instant are not allowed. Two slots
    that merely touch (one stops exactly when the other starts) do not
    overlap.
    """

    start: datetime
    stop: datetime

    MINUTES_OF_TOLERANCE_FOR_OVERLAPPING: ClassVar[int] = MINUTES_OF_TOLERANCE_FOR_OVERLAPPING

    def __post_init__(self) -> None:
        require(self.start, "start")
        require(self.stop, "stop")
        if self.start >= self.stop:
            raise InvalidArgumentError("Time slot start must be earlier than stop.")

    def get_start(self) -> datetime:
        return self.start

    def get_stop(self) -> datetime:
        return self.stop

    @property
    def duration_minutes(self) -> int:
        return (self.stop - self.start) // _ONE_MINUTE

    def compare_to(self, other: TimeSlot) -> int:
        """Order by start, then by stop. Returns -1, 0 or 1."""
        require(other, "other")
        left = (self.start, self.stop)
        right = (other.start, other.stop)
        if left < right:
            return -1
        if left > right:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if other is None:
            raise MissingValueError("other must not be None")
        if not isinstance(other, TimeSlot):
            return NotImplemented
        return self.compare_to(other) < 0

    def get_minutes_of_overlapping_with(self, other: TimeSlot) -> int:
        """Return the whole minutes shared by this slot and ``other``.

        Returns -1 when the slots do not overlap, including when one stops at
        the exact instant the other starts. Leftover seconds and microseconds
        are truncated. A zero-length overlap is reported as -1, never 0.
        """
        require(other, "other")

        if self.start < other.start and other.start < self.stop < other.stop:
            # self.start - other.start - self.stop - other.stop
            return _whole_minutes(self.stop - other.start)

        if self.start < other.start and self.stop > other.stop:
            # self.start - other.start - other.stop - self.stop
            return _whole_minutes(other.stop - other.start)

        if other.start < self.start < other.stop and self.stop > other.stop:
            # other.start - self.start - other.stop - self.stop
            return _whole_minutes(other.stop - self.start)

        if self.start > other.start and self.stop < other.stop:
            # other.start - self.start - self.stop - other.stop
            return _whole_minutes(self.stop - self.start)

        return NO_OVERLAP

    def overlaps_with(self, other: TimeSlot) -> bool:
        """Return True when the slots share more than the tolerated minutes."""
        require(other, "other")
        minutes = self.get_minutes_of_overlapping_with(other)
        if minutes == NO_OVERLAP:
            return False
        return minutes > self.MINUTES_OF_TOLERANCE_FOR_OVERLAPPING

    def __str__(self) -> str:
        return f"[{_format_instant(self.start)} - {_format_instant(self.stop)}]"

    def to_dict(self) -> dict[str, str]:
        return {
            "start": self.start.isoformat(),
            "stop": self.stop.isoformat(),
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "TimeSlot":
        try:
            start = datetime.fromisoformat(str(data["start"]))
            stop = datetime.fromisoformat(str(data["stop"]))
        except KeyError as error:
            raise ReservationFormatError(f"time slot is missing field {error}") from error
        except TypeError as error:
            raise ReservationFormatError("time slot must be a mapping") from error
        except ValueError as error:
            raise ReservationFormatError(f"time slot has an invalid instant: {error}") from error

        try:
            return TimeSlot(start, stop)
        except (InvalidArgumentError, TypeError) as error:
            raise ReservationFormatError(f"time slot is not a valid interval: {error}") from error


def _whole_minutes(overlap: timedelta) -> int:
    if overlap == timedelta(0):
        return NO_OVERLAP

    minutes = overlap // _ONE_MINUTE
    if minutes > MAX_OVERLAP_MINUTES:
        raise InvalidArgumentError("Overlapping minutes are too many to be represented.")
    return minutes


def _format_instant(value: datetime) -> str:
    return f"{value.day}/{value.month}/{value.year} {value.hour}.{value.minute}"
