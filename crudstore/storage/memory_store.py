"""
In-memory keyed store.

One ``MemoryStore`` instance backs one resource collection. Data lives for
the lifetime of the process only.
"""
import logging
from typing import Dict, List, Optional, Type

from crudstore.models.record import Record
from .identity import IdentityPolicy
from .interface import RecordT, Store
from .rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class MemoryStore(Store[RecordT]):
    """
    Thread-safe in-memory store for a single record shape.

    Reads take a shared hold on the lock and mutations an exclusive one. The
    exclusive hold covers only identity assignment and the dict mutation.
    """

    def __init__(self, record_type: Type[RecordT], policy: Optional[IdentityPolicy] = None):
        """
        Initialize an empty store.

        Args:
            record_type: Record subclass held by this store
            policy: Identity policy (default: random UUIDs, UTC clock)

        Raises:
            TypeError: If ``record_type`` is not a Record subclass
        """
        if not (isinstance(record_type, type) and issubclass(record_type, Record)):
            raise TypeError(f"MemoryStore requires a Record subclass, got {record_type!r}")
        self.record_type = record_type
        self._policy = policy or IdentityPolicy()
        self._records: Dict[str, RecordT] = {}
        self._lock = ReadWriteLock()

    def _require_own_type(self, raw: object) -> None:
        if not isinstance(raw, self.record_type):
            raise TypeError(
                f"{type(self).__name__} of {self.record_type.__name__} cannot store {type(raw).__name__}"
            )

    def list_all(self) -> List[RecordT]:
        with self._lock.read_lock():
            return list(self._records.values())

    def get_by_id(self, record_id: str) -> Optional[RecordT]:
        with self._lock.read_lock():
            return self._records.get(record_id)

    def create(self, raw: RecordT) -> RecordT:
        """
        Store a new record.

        Args:
            raw: Caller-supplied record; its identity fields are ignored

        Returns:
            The stored record

        Raises:
            TypeError: If ``raw`` is not an instance of the store's record type
            ValueError: If the generated identifier is already in use
        """
        self._require_own_type(raw)
        with self._lock.write_lock():
            record = self._policy.assign_on_create(raw)
            if record.id in self._records:
                raise ValueError(f"Identifier collision for {self.record_type.__name__} {record.id}")
            self._records[record.id] = record
        logger.debug(f"Created {self.record_type.__name__} {record.id}")
        return record

    def update(self, record_id: str, raw: RecordT) -> Optional[RecordT]:
        """
        Replace an existing record.

        This is a full replacement of the domain fields, not a merge.

        Args:
            record_id: ID of the record to replace
            raw: Caller-supplied replacement

        Returns:
            The stored record, or None if no record has this ID

        Raises:
            TypeError: If ``raw`` is not an instance of the store's record type
        """
        self._require_own_type(raw)
        with self._lock.write_lock():
            previous = self._records.get(record_id)
            if previous is None:
                return None
            record = self._policy.assign_on_update(raw, previous)
            self._records[record_id] = record
        logger.debug(f"Updated {self.record_type.__name__} {record_id}")
        return record

    def delete_by_id(self, record_id: str) -> bool:
        with self._lock.write_lock():
            if record_id not in self._records:
                return False
            del self._records[record_id]
        logger.debug(f"Deleted {self.record_type.__name__} {record_id}")
        return True

    def count(self) -> int:
        with self._lock.read_lock():
            return len(self._records)
