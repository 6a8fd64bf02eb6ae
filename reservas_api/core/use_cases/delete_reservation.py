from __future__ import annotations

import logging

from reservas_api.core.repositories.reservation_repository import ReservationRepository
from reservas_api.core.use_cases.errors import NotFoundError

logger = logging.getLogger(__name__)


class DeleteReservationUseCase:
    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self, *, reservation_id: int) -> None:
        reservations = self._reservation_repo.load()
        index = next((i for i, r in enumerate(reservations) if r.id == reservation_id), None)
        if index is None:
            raise NotFoundError(f"No se encontró ninguna reserva con el ID {reservation_id}")

        del reservations[index]
        self._reservation_repo.save(reservations)
        logger.info("Deleted reservation %d", reservation_id)
