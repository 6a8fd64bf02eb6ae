from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from reservas_api.core.entities.reservation import Reservation
from reservas_api.core.repositories.reservation_repository import ReservationRepository
from reservas_api.core.use_cases.errors import StorageFailure
from reservas_api.infrastructure.models.reservation_store import ReservationStore

logger = logging.getLogger(__name__)


def _is_reservation_record(item: Any) -> bool:
    return isinstance(item, dict) and isinstance(item.get("id"), int) and not isinstance(item["id"], bool)


class JsonReservationRepositoryImpl(ReservationRepository):
    """
    Reservation repository backed by one JSON document.

    Responsibilities:
      - translate between core Reservation entities and persisted dict records
      - treat a missing or malformed document as an empty collection
      - carry array items it cannot parse through every save untouched
      - surface write errors as StorageFailure

    Raw file access is delegated to ReservationStore.
    """

    def __init__(self, *, file_path: str | Path) -> None:
        self._store = ReservationStore(Path(file_path))

    def _read_items(self) -> list[Any] | None:
        """Return the stored array, or None if the document is absent or unusable."""
        try:
            data = self._store.read()
        except FileNotFoundError:
            logger.warning("Reservations file %s does not exist, starting empty", self._store.path)
            return None
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Could not read reservations file %s: %s", self._store.path, e)
            return None

        if not isinstance(data, list):
            logger.warning("Reservations file %s does not contain a JSON array", self._store.path)
            return None
        return data

    def load(self) -> list[Reservation]:
        items = self._read_items() or []

        reservations: list[Reservation] = []
        for item in items:
            if not _is_reservation_record(item):
                logger.warning("Skipping malformed reservation record: %r", item)
                continue
            reservations.append(Reservation.from_record(item))

        logger.info("Loaded %d reservations from %s", len(reservations), self._store.path)
        return reservations

    def save(self, reservations: list[Reservation]) -> None:
        # Items load() skipped cannot be addressed through the API, so they are kept as stored.
        unparsed = [item for item in self._read_items() or [] if not _is_reservation_record(item)]
        if unparsed:
            logger.warning("Keeping %d malformed records in %s", len(unparsed), self._store.path)

        try:
            self._store.write([r.to_record() for r in reservations] + unparsed)
        except OSError as e:
            logger.error("Could not write reservations file %s: %s", self._store.path, e)
            raise StorageFailure("Error al guardar las reservas") from e

        logger.info("Saved %d reservations to %s", len(reservations), self._store.path)
