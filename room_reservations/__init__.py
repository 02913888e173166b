from .booking import Reservation
from .errors import InvalidArgumentError, MissingValueError, ReservationFormatError
from .time_slot import MAX_OVERLAP_MINUTES, MINUTES_OF_TOLERANCE_FOR_OVERLAPPING, NO_OVERLAP, TimeSlot
from .yaml_codec import dump_reservations, load_reservations

__all__ = [
	"Reservation",
	"TimeSlot",
	"MINUTES_OF_TOLERANCE_FOR_OVERLAPPING",
	"MAX_OVERLAP_MINUTES",
	"NO_OVERLAP",
	"InvalidArgumentError",
	"MissingValueError",
	"ReservationFormatError",
	"dump_reservations",
	"load_reservations",
]
