from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ReservationCreate(BaseModel):
    nombre: str = Field(..., description="Nombre del huésped.", examples=["Luis Torres"])
    habitacion: str = Field(..., description="Número de la habitación reservada.", examples=["109"])
    hotel: str = Field(..., description="Nombre del hotel.", examples=["Hotel Paraíso"])
    tipo_habitacion: str = Field(..., description="Tipo de habitación (ej. \"doble\", \"suite\").", examples=["SUITE"])
    fecha_inicio: str = Field(..., description="Fecha de inicio (formato YYYY-MM-DD).", examples=["2024-10-15"])
    fecha_fin: str = Field(..., description="Fecha de fin (formato YYYY-MM-DD).", examples=["2024-10-20"])
    estado: str = Field(..., description="Estado de la reserva (ej. \"PENDIENTE\", \"CONFIRMADA\").", examples=["PENDIENTE"])
    num_huespedes: int = Field(..., description="Número de huéspedes.", examples=[2])


class ReservationUpdate(BaseModel):
    nombre: str | None = None
    habitacion: str | None = None
    hotel: str | None = None
    tipo_habitacion: str | None = None
    fecha_inicio: str | None = None
    fecha_fin: str | None = None
    estado: str | None = None
    num_huespedes: int | None = None


class Reservation(BaseModel):
    model_config = ConfigDict(from_attributes=True, coerce_numbers_to_str=True)

    id: int
    nombre: str | None = None
    habitacion: str | None = None
    hotel: str | None = None
    tipo_habitacion: str | None = None
    fecha_inicio: str | None = None
    fecha_fin: str | None = None
    estado: str | None = None
    # Stored documents are not validated on load; a loose guest count is returned as found.
    num_huespedes: int | float | str | None = None


class ReservationList(BaseModel):
    mensaje: str
    reservas: List[Reservation]


class ReservationSummary(BaseModel):
    totalReservas: int
