"""
Pydantic model for inventory items.
"""
from pydantic import Field

from .record import Record


class Item(Record):
    """Item record."""
    name: str = Field("", description="Item name")
    description: str = Field("", description="Item description")
