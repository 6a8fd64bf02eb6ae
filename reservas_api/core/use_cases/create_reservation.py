from __future__ import annotations

import logging
from typing import Any

from reservas_api.core.entities.reservation import RESERVATION_FIELDS, Reservation
from reservas_api.core.repositories.reservation_repository import ReservationRepository

logger = logging.getLogger(__name__)


def next_reservation_id(reservations: list[Reservation]) -> int:
    """
    One past the highest stored id. Matches len + 1 for a collection that was
    never deleted from, and never reuses an id that is still present.
    """
    return max((r.id for r in reservations), default=0) + 1


class CreateReservationUseCase:
    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self, *, fields: dict[str, Any]) -> Reservation:
        reservations = self._reservation_repo.load()

        reservation = Reservation(
            id=next_reservation_id(reservations),
            **{name: fields.get(name) for name in RESERVATION_FIELDS},
        )
        reservations.append(reservation)
        self._reservation_repo.save(reservations)

        logger.info("Created reservation %d for hotel %s", reservation.id, reservation.hotel)
        return reservation
