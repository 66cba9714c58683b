"""
Pydantic record shapes served by the API.
"""
from .record import Record
from .item_models import Item
from .client_models import Client

__all__ = [
    "Record",
    "Item",
    "Client",
]
