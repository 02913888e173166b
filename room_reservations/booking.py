from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from typing import Any

from .errors import MissingValueError, ReservationFormatError, require
from .time_slot import TimeSlot

_FIXED_FIELDS = ("room", "time_slot")
_EDITABLE_FIELDS = ("requester", "reason")


@dataclass(unsafe_hash=True)
class Reservation:
    """A room booked for a time slot by a requester for a reason.

    Two reservations are the same booking when they share the room and the
    time slot; requester and reason can change without affecting equality or
    the hash.
    """

    room: str
    time_slot: TimeSlot
    requester: str = field(compare=False)
    reason: str = field(compare=False)

    def __post_init__(self) -> None:
        require(self.room, "room")
        require(self.time_slot, "time_slot")
        require(self.requester, "requester")
        require(self.reason, "reason")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _FIXED_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        if name in _EDITABLE_FIELDS:
            require(value, name)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _FIXED_FIELDS or name in _EDITABLE_FIELDS:
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)

    def get_room(self) -> str:
        return self.room

    def get_time_slot(self) -> TimeSlot:
        return self.time_slot

    def get_requester(self) -> str:
        return self.requester

    def get_reason(self) -> str:
        return self.reason

    def set_requester(self, requester: str) -> None:
        self.requester = requester

    def set_reason(self, reason: str) -> None:
        self.reason = reason

    def compare_to(self, other: Reservation) -> int:
        """Order by time slot; reservations for the same slot fall back to the room name, ignoring case."""
        require(other, "other")
        cmp = self.time_slot.compare_to(other.time_slot)
        if cmp != 0:
            return cmp

        room = self.room.lower()
        other_room = other.room.lower()
        if room < other_room:
            return -1
        if room > other_room:
            return 1
        return 0

    def _compare(self, other: object) -> int | None:
        if other is None:
            raise MissingValueError("other must not be None")
        if not isinstance(other, Reservation):
            return None
        return self.compare_to(other)

    def __lt__(self, other: object) -> bool:
        cmp = self._compare(other)
        return NotImplemented if cmp is None else cmp < 0

    def __le__(self, other: object) -> bool:
        cmp = self._compare(other)
        return NotImplemented if cmp is None else cmp <= 0

    def __gt__(self, other: object) -> bool:
        cmp = self._compare(other)
        return NotImplemented if cmp is None else cmp > 0

    def __ge__(self, other: object) -> bool:
        cmp = self._compare(other)
        return NotImplemented if cmp is None else cmp >= 0

    def overlaps_with(self, other: Reservation) -> bool:
        """Return True when both reservations hold the same room for overlapping slots."""
        require(other, "other")
        return self.room == other.room and self.time_slot.overlaps_with(other.time_slot)

    def __str__(self) -> str:
        return (
            f"Reservation for room:{self.room}, time slot: {self.time_slot}, "
            f"requester:{self.requester}, reason:{self.reason}."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "room": self.room,
            "time_slot": self.time_slot.to_dict(),
            "requester": self.requester,
            "reason": self.reason,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Reservation":
        if not isinstance(data, dict):
            raise ReservationFormatError("reservation must be a mapping")

        missing = [name for name in ("room", "time_slot", "requester", "reason") if data.get(name) is None]
        if missing:
            raise ReservationFormatError(f"reservation is missing fields: {', '.join(missing)}")

        return Reservation(
            room=str(data["room"]),
            time_slot=TimeSlot.from_dict(data["time_slot"]),
            requester=str(data["requester"]),
            reason=str(data["reason"]),
        )
