"""
Base record shape shared by every resource collection.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """
    A stored entity with an identifier and creation/modification timestamps.

    Every resource shape subclasses ``Record`` and adds its own domain fields.
    The identity fields are owned by the store: whatever a caller supplies for
    them is replaced when the record is created or updated. Records are frozen
    so a stored value cannot be changed behind the store's lock.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field("", description="Unique identifier assigned by the store")
    created_at: Optional[datetime] = Field(None, description="Creation time (UTC)")
    updated_at: Optional[datetime] = Field(None, description="Last modification time (UTC)")

    def with_identity(self, record_id: str, created_at: datetime, updated_at: datetime) -> "Record":
        """Return a copy of this record carrying the given identity fields."""
        return self.model_copy(
            update={"id": record_id, "created_at": created_at, "updated_at": updated_at}
        )
