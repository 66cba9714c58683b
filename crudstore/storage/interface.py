"""
Storage interface - defines the contract for all keyed record stores.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from crudstore.models.record import Record

RecordT = TypeVar("RecordT", bound=Record)


class Store(ABC, Generic[RecordT]):
    """Abstract interface for keyed storage of one record shape."""

    @abstractmethod
    def list_all(self) -> List[RecordT]:
        """Return every stored record, in no particular order."""
        pass

    @abstractmethod
    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        """Get a record by ID, or None if absent."""
        pass

    @abstractmethod
    def create(self, raw: RecordT) -> RecordT:
        """Store a new record and return it with identity fields assigned."""
        pass

    @abstractmethod
    def update(self, record_id: str, raw: RecordT) -> Optional[RecordT]:
        """Replace a record. Returns the stored record, or None if absent."""
        pass

    @abstractmethod
    def delete_by_id(self, record_id: str) -> bool:
        """Delete a record. Returns False if it was absent."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""
        pass
