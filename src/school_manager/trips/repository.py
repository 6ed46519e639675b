from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Trip


class TripRepository(Protocol):
    def create(self, trip: Trip) -> str:
        raise NotImplementedError

    def save(self, trip_id: str, trip: Trip) -> None:
        raise NotImplementedError

    def get_by_id(self, trip_id: str) -> Optional[Trip]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Trip]:
        raise NotImplementedError

    def delete(self, trip_id: str) -> None:
        raise NotImplementedError
