from __future__ import annotations

from abc import ABC, abstractmethod

from reservas_api.core.entities.reservation import Reservation


class ReservationRepository(ABC):
    """
    Repository interface over the whole reservation collection.

    The collection is the unit of persistence: callers load everything, work on
    the list in memory and save everything back.
    """

    @abstractmethod
    def load(self) -> list[Reservation]:
        """Return every stored reservation, or [] if the store is absent or unreadable."""
        raise NotImplementedError

    @abstractmethod
    def save(self, reservations: list[Reservation]) -> None:
        """Overwrite the store with the given collection. Raises StorageFailure on write errors."""
        raise NotImplementedError
