from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from reservas_api.core.repositories.reservation_repository import ReservationRepository
from reservas_api.core.use_cases.errors import InvalidInputError, NotFoundError, StorageFailure
from reservas_api.core.use_cases.filter_reservations import FilterCriteria
from reservas_api.schemas.models import (
    Reservation,
    ReservationCreate,
    ReservationList,
    ReservationSummary,
    ReservationUpdate,
)
from reservas_api.services.reservations_service import (
    create_reservation_service,
    default_repository,
    delete_reservation_service,
    get_reservation_service,
    get_reservation_summary_service,
    list_reservations_service,
    update_reservation_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reservas", tags=["reservas"])

_NOT_FOUND = {404: {"description": "Reserva no encontrada."}}
_STORAGE_ERROR = {500: {"description": "No se pudieron guardar las reservas."}}


def get_repository() -> ReservationRepository:
    return default_repository()


@router.get(
    "",
    response_model=ReservationList,
    summary="Obtener todas las reservas o aplicar filtros.",
    responses={
        400: {"description": "Fechas con formato inválido (use YYYY-MM-DD)."},
        404: {"description": "No se encontraron reservas con los filtros aplicados."},
    },
)
def get_reservas(
    hotel: str | None = Query(None, description="Filtra las reservas por nombre del hotel."),
    fecha_inicio: str | None = Query(None, description="Fecha de inicio del rango (formato YYYY-MM-DD)."),
    fecha_fin: str | None = Query(None, description="Fecha de fin del rango (formato YYYY-MM-DD)."),
    tipo_habitacion: str | None = Query(None, description="Filtra por tipo de habitación (ej. \"doble\", \"suite\")."),
    estado: str | None = Query(None, description="Filtra por estado (ej. \"PENDIENTE\", \"CONFIRMADA\")."),
    num_huespedes: str | None = Query(None, description="Filtra por número de huéspedes."),
    repo: ReservationRepository = Depends(get_repository),
) -> ReservationList:
    """
    List reservations, optionally filtered by hotel, date range, room type,
    status and guest count. Filters apply in that order and the first one that
    matches nothing is reported.

    Returns:
      - 200 with a message and the matching reservations
      - 400 if the date range cannot be parsed
      - 404 naming the first filter that matched nothing
    """
    criteria = FilterCriteria(
        hotel=hotel,
        fecha_inicio=fecha_inicio,
        fecha_fin=fecha_fin,
        tipo_habitacion=tipo_habitacion,
        estado=estado,
        num_huespedes=num_huespedes,
    )
    try:
        return list_reservations_service(criteria, repo)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "",
    response_model=Reservation,
    status_code=201,
    summary="Crear una nueva reserva.",
    responses=_STORAGE_ERROR,
)
def post_reservas(body: ReservationCreate, repo: ReservationRepository = Depends(get_repository)) -> Reservation:
    """
    Create a reservation with the next sequential id
    """
    try:
        return create_reservation_service(body, repo)
    except StorageFailure as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get(
    "/resumen",
    response_model=ReservationSummary,
    summary="Obtener un resumen del total de reservas.",
    responses={
        404: {"description": "No hay reservas registradas."},
        500: {"description": "Error al obtener el resumen de reservas."},
    },
)
def get_reservas_resumen(repo: ReservationRepository = Depends(get_repository)) -> ReservationSummary:
    try:
        return get_reservation_summary_service(repo)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception:
        logger.exception("Error while building the reservations summary")
        raise HTTPException(status_code=500, detail="Error al obtener el resumen de reservas")


@router.get(
    "/{reservation_id}",
    response_model=Reservation,
    summary="Obtener detalles de una reserva por su ID.",
    responses=_NOT_FOUND,
)
def get_reservas_reservation_id(
    reservation_id: int, repo: ReservationRepository = Depends(get_repository)
) -> Reservation:
    try:
        return get_reservation_service(reservation_id, repo)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put(
    "/{reservation_id}",
    response_model=Reservation,
    summary="Actualizar una reserva existente.",
    responses={**_NOT_FOUND, **_STORAGE_ERROR},
)
def put_reservas_reservation_id(
    reservation_id: int,
    body: ReservationUpdate,
    repo: ReservationRepository = Depends(get_repository),
) -> Reservation:
    """
    Partial update: fields left out (or null / empty) keep their stored value
    """
    try:
        return update_reservation_service(reservation_id, body, repo)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageFailure as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete(
    "/{reservation_id}",
    status_code=204,
    response_model=None,
    summary="Eliminar una reserva por su ID.",
    responses={**_NOT_FOUND, **_STORAGE_ERROR},
)
def delete_reservas_reservation_id(
    reservation_id: int, repo: ReservationRepository = Depends(get_repository)
) -> Response:
    try:
        delete_reservation_service(reservation_id, repo)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageFailure as e:
        raise HTTPException(status_code=500, detail=str(e))

    return Response(status_code=204)
