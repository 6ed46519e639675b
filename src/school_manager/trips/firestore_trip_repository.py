from __future__ import annotations

from ..database.firestore_repository import FirestoreRepository
from .model import Trip


class FirestoreTripRepository(FirestoreRepository[Trip]):
    collection = "trips"
    model = Trip
