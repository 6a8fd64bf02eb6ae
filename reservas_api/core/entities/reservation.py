from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

RESERVATION_FIELDS: tuple[str, ...] = (
    "nombre",
    "habitacion",
    "hotel",
    "tipo_habitacion",
    "fecha_inicio",
    "fecha_fin",
    "estado",
    "num_huespedes",
)


@dataclass(slots=True)
class Reservation:
    id: int
    nombre: str | None = None
    habitacion: str | None = None
    hotel: str | None = None
    tipo_habitacion: str | None = None
    fecha_inicio: str | None = None
    fecha_fin: str | None = None
    estado: str | None = None
    num_huespedes: int | None = None
    # Keys of the persisted record this entity does not model; written back unchanged.
    extras: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Reservation:
        """
        Build a reservation from a persisted dict. Missing fields load as None,
        unknown keys are kept in ``extras``.
        """
        known = {"id", *RESERVATION_FIELDS}
        return cls(
            **{k: v for k, v in record.items() if k in known},
            extras={k: v for k, v in record.items() if k not in known},
        )

    def to_record(self) -> dict[str, Any]:
        record = {f.name: getattr(self, f.name) for f in fields(self) if f.name != "extras"}
        for key, value in self.extras.items():
            record.setdefault(key, value)
        return record

    def apply_changes(self, changes: dict[str, Any]) -> None:
        """
        Merge a partial update. A value of None or "" means "not supplied" and keeps
        the stored value; 0 is a supplied value.
        """
        for name in RESERVATION_FIELDS:
            value = changes.get(name)
            if value is None or value == "":
                continue
            setattr(self, name, value)
