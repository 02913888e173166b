from __future__ import annotations

import logging
from typing import Any, Iterable

import yaml

from .booking import Reservation
from .errors import ReservationFormatError

logger = logging.getLogger(__name__)


def dump_reservations(reservations: Iterable[Reservation]) -> str:
    """Render reservations as a YAML list, one mapping per reservation."""
    rows = [reservation.to_dict() for reservation in reservations]
    logger.debug("Dumping %s reservations to YAML", len(rows))
    return yaml.safe_dump(rows, allow_unicode=True, sort_keys=False)


def load_reservations(text: str) -> list[Reservation]:
    """Parse a YAML list produced by :func:`dump_reservations`.

    Rows that are not mappings are skipped with a warning. Mapping rows that
    do not describe a valid reservation make the whole load fail.
    """
    rows = _read_yaml_list(text)

    reservations: list[Reservation] = []
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            logger.warning("Skipping YAML row %s: row is not a mapping", index)
            continue
        try:
            reservations.append(Reservation.from_dict(row))
        except ReservationFormatError as error:
            raise ReservationFormatError(f"row {index}: {error}") from error

    logger.debug("Loaded %s reservations from YAML", len(reservations))
    return reservations


def _read_yaml_list(text: str) -> list[Any]:
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as error:
        raise ReservationFormatError(f"Invalid YAML: {error}") from error

    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ReservationFormatError("top-level YAML is not a list")
    return payload
