from __future__ import annotations

import logging
from typing import Any

from reservas_api.core.entities.reservation import Reservation
from reservas_api.core.repositories.reservation_repository import ReservationRepository
from reservas_api.core.use_cases.errors import NotFoundError
from reservas_api.core.use_cases.get_reservation import NOT_FOUND_MESSAGE, find_reservation

logger = logging.getLogger(__name__)


class UpdateReservationUseCase:
    """
    Partial update: supplied fields replace stored ones, the rest are kept.
    The whole collection is written back afterwards.
    """

    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self, *, reservation_id: int, changes: dict[str, Any]) -> Reservation:
        reservations = self._reservation_repo.load()
        reservation = find_reservation(reservations, reservation_id)
        if reservation is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)

        reservation.apply_changes(changes)
        self._reservation_repo.save(reservations)

        logger.info("Updated reservation %d", reservation_id)
        return reservation
