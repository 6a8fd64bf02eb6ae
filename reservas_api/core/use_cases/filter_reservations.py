from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime

from reservas_api.core.entities.reservation import Reservation
from reservas_api.core.repositories.reservation_repository import ReservationRepository
from reservas_api.core.use_cases.errors import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
FOUND_MESSAGE = "Reservas encontradas:"
EMPTY_MESSAGE = "No se encontraron reservas."
INVALID_DATES_MESSAGE = "Fechas inválidas. Utilice el formato YYYY-MM-DD."
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """
    Optional listing filters, as received from the query string.
    Empty strings count as not supplied.
    """
    hotel: str | None = None
    fecha_inicio: str | None = None
    fecha_fin: str | None = None
    tipo_habitacion: str | None = None
    estado: str | None = None
    num_huespedes: str | None = None


@dataclass(frozen=True, slots=True)
class ReservationListDTO:
    """
    Use-case return type for GET /api/reservas
    """
    mensaje: str
    reservas: list[Reservation]


def _parse_date(value: str | None) -> date | None:
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def _leading_int(value: str) -> int | None:
    """Leading integer of the text ("2.0" -> 2, "3 personas" -> 3), or None if there is none."""
    match = _LEADING_INT.match(value)
    return int(match.group(0)) if match else None


def _same_text(stored: str | None, wanted: str) -> bool:
    return isinstance(stored, str) and stored.lower() == wanted.lower()


def _within(reservation: Reservation, start: date, end: date) -> bool:
    own_start = _parse_date(reservation.fecha_inicio)
    own_end = _parse_date(reservation.fecha_fin)
    if own_start is None or own_end is None:
        return False
    return own_start >= start and own_end <= end


def apply_filters(reservations: list[Reservation], criteria: FilterCriteria) -> list[Reservation]:
    """
    Narrow the collection one criterion at a time, in a fixed order:
    hotel, date range, room type, status, guest count.

    Each step works on the previous step's output. The first step that leaves
    nothing raises NotFoundError with a message naming that criterion, so only
    the first failing filter is ever reported.

    Raises InvalidInputError when the date range cannot be parsed. A guest count
    with no leading integer matches nothing.
    """
    result = list(reservations)

    if criteria.hotel:
        logger.debug("Filtering by hotel: %s", criteria.hotel)
        result = [r for r in result if _same_text(r.hotel, criteria.hotel)]
        if not result:
            raise NotFoundError(f"No se encontraron reservas para el hotel {criteria.hotel}.")

    if criteria.fecha_inicio and criteria.fecha_fin:
        logger.debug("Filtering by dates: %s to %s", criteria.fecha_inicio, criteria.fecha_fin)
        start = _parse_date(criteria.fecha_inicio)
        end = _parse_date(criteria.fecha_fin)
        if start is None or end is None:
            raise InvalidInputError(INVALID_DATES_MESSAGE)
        result = [r for r in result if _within(r, start, end)]
        if not result:
            raise NotFoundError("No se encontraron reservas en el rango de fechas proporcionado.")

    if criteria.tipo_habitacion:
        logger.debug("Filtering by room type: %s", criteria.tipo_habitacion)
        result = [r for r in result if _same_text(r.tipo_habitacion, criteria.tipo_habitacion)]
        if not result:
            raise NotFoundError(
                f"No se encontraron reservas con tipo de habitación {criteria.tipo_habitacion}."
            )

    if criteria.estado:
        logger.debug("Filtering by status: %s", criteria.estado)
        result = [r for r in result if _same_text(r.estado, criteria.estado)]
        if not result:
            raise NotFoundError(f"No se encontraron reservas con estado {criteria.estado}.")

    if criteria.num_huespedes:
        logger.debug("Filtering by guest count: %s", criteria.num_huespedes)
        guests = _leading_int(criteria.num_huespedes)
        result = [
            r for r in result
            if guests is not None and not isinstance(r.num_huespedes, bool) and r.num_huespedes == guests
        ]
        if not result:
            raise NotFoundError(f"No se encontraron reservas con {criteria.num_huespedes} huéspedes.")

    return result


class FilterReservationsUseCase:
    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self, *, criteria: FilterCriteria) -> ReservationListDTO:
        reservations = self._reservation_repo.load()
        matches = apply_filters(reservations, criteria)
        logger.info("Listing returned %d of %d reservations", len(matches), len(reservations))

        return ReservationListDTO(
            mensaje=FOUND_MESSAGE if matches else EMPTY_MESSAGE,
            reservas=matches,
        )
