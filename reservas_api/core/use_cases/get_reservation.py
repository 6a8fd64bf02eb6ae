from __future__ import annotations

from reservas_api.core.entities.reservation import Reservation
from reservas_api.core.repositories.reservation_repository import ReservationRepository
from reservas_api.core.use_cases.errors import NotFoundError

NOT_FOUND_MESSAGE = "Reserva no encontrada"


def find_reservation(reservations: list[Reservation], reservation_id: int) -> Reservation | None:
    return next((r for r in reservations if r.id == reservation_id), None)


class GetReservationUseCase:
    def __init__(self, *, reservation_repo: ReservationRepository) -> None:
        self._reservation_repo = reservation_repo

    def execute(self, *, reservation_id: int) -> Reservation:
        reservation = find_reservation(self._reservation_repo.load(), reservation_id)
        if reservation is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return reservation
