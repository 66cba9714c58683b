"""
Identity policy - assigns identifiers and timestamps to records.

The policy works against the ``Record`` base class only, so new record shapes
never require changes here.
"""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, TypeVar

from crudstore.models.record import Record

RecordT = TypeVar("RecordT", bound=Record)


def new_record_id() -> str:
    """Generate a random 128-bit identifier in canonical UUID form."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def _require_record(value: object, name: str) -> None:
    if not isinstance(value, Record):
        raise TypeError(f"{name} must be a Record, got {type(value).__name__}")


class IdentityPolicy:
    """Assigns identity fields on creation and carries them over on update."""

    def __init__(
        self,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the policy.

        Args:
            id_factory: Callable returning a fresh identifier (default: uuid4 string)
            clock: Callable returning the current time (default: UTC now)
        """
        self._id_factory = id_factory or new_record_id
        self._clock = clock or utc_now

    def assign_on_create(self, raw: RecordT) -> RecordT:
        """
        Build the record to persist for a newly created entry.

        Any identifier or timestamps supplied by the caller are discarded.
        Both timestamps come from a single clock reading.

        Args:
            raw: Caller-supplied record

        Returns:
            Copy of ``raw`` with a fresh ID and creation/modification time set

        Raises:
            ValueError: If the ID factory produced an empty identifier
        """
        _require_record(raw, "raw")
        record_id = self._id_factory()
        if not record_id:
            raise ValueError("Identifier factory returned an empty identifier")
        now = self._clock()
        return raw.with_identity(record_id, now, now)

    def assign_on_update(self, raw: RecordT, previous: Record) -> RecordT:
        """
        Build the record that replaces ``previous``.

        ID and creation time come from ``previous``; every other field comes
        from ``raw``, so fields omitted by the caller are reset rather than
        merged. The modification time is always later than the previous one,
        even if the clock has stalled or stepped backwards.

        Args:
            raw: Caller-supplied replacement record
            previous: Currently stored record

        Returns:
            Copy of ``raw`` carrying the preserved identity and a fresh modification time
        """
        _require_record(raw, "raw")
        _require_record(previous, "previous")
        now = self._clock()
        if previous.updated_at is not None and now <= previous.updated_at:
            now = previous.updated_at + timedelta(microseconds=1)
        return raw.with_identity(previous.id, previous.created_at, now)
