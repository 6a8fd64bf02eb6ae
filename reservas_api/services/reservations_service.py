from __future__ import annotations

import threading

from reservas_api.core.repositories.reservation_repository import ReservationRepository
from reservas_api.core.use_cases.create_reservation import CreateReservationUseCase
from reservas_api.core.use_cases.delete_reservation import DeleteReservationUseCase
from reservas_api.core.use_cases.filter_reservations import FilterCriteria, FilterReservationsUseCase
from reservas_api.core.use_cases.get_reservation import GetReservationUseCase
from reservas_api.core.use_cases.get_reservation_summary import GetReservationSummaryUseCase
from reservas_api.core.use_cases.update_reservation import UpdateReservationUseCase
from reservas_api.infrastructure.repositories.reservation_repository_json_impl import JsonReservationRepositoryImpl
from reservas_api.schemas.models import (
    Reservation,
    ReservationCreate,
    ReservationList,
    ReservationSummary,
    ReservationUpdate,
)

# Load-modify-save sequences hold this lock so concurrent writers in this
# process cannot overwrite each other's changes.
_write_lock = threading.Lock()


def default_repository() -> ReservationRepository:
    from reservas_api.infrastructure.config import settings
    return JsonReservationRepositoryImpl(file_path=settings.data_path)


def list_reservations_service(criteria: FilterCriteria, repo: ReservationRepository) -> ReservationList:
    use_case = FilterReservationsUseCase(reservation_repo=repo)

    dto = use_case.execute(criteria=criteria)

    return ReservationList(
        mensaje=dto.mensaje,
        reservas=[Reservation.model_validate(r) for r in dto.reservas],
    )


def create_reservation_service(body: ReservationCreate, repo: ReservationRepository) -> Reservation:
    use_case = CreateReservationUseCase(reservation_repo=repo)

    with _write_lock:
        reservation = use_case.execute(fields=body.model_dump())

    return Reservation.model_validate(reservation)


def get_reservation_service(reservation_id: int, repo: ReservationRepository) -> Reservation:
    use_case = GetReservationUseCase(reservation_repo=repo)

    return Reservation.model_validate(use_case.execute(reservation_id=reservation_id))


def update_reservation_service(
    reservation_id: int, body: ReservationUpdate, repo: ReservationRepository
) -> Reservation:
    use_case = UpdateReservationUseCase(reservation_repo=repo)

    with _write_lock:
        reservation = use_case.execute(reservation_id=reservation_id, changes=body.model_dump(exclude_unset=True))

    return Reservation.model_validate(reservation)


def delete_reservation_service(reservation_id: int, repo: ReservationRepository) -> None:
    use_case = DeleteReservationUseCase(reservation_repo=repo)

    with _write_lock:
        use_case.execute(reservation_id=reservation_id)


def get_reservation_summary_service(repo: ReservationRepository) -> ReservationSummary:
    use_case = GetReservationSummaryUseCase(reservation_repo=repo)

    dto = use_case.execute()

    return ReservationSummary(totalReservas=dto.total)
