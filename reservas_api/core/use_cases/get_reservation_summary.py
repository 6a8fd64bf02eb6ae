from __future__ import annotations

from dataclasses import dataclass

from reservas_api.core.repositories.reservation_repository import ReservationRepository
from reservas_api.core.use_cases.errors import NotFoundError


@dataclass(frozen=True, slots=True)
class ReservationSummaryDTO:
    """
    Use-case return type for GET /api/reservas/resumen
    """
    total: int


class GetReservationSummaryUseCase:
    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self) -> ReservationSummaryDTO:
        reservations = self._reservation_repo.load()
        if not reservations:
            raise NotFoundError("No hay reservas registradas")

        return ReservationSummaryDTO(total=len(reservations))
