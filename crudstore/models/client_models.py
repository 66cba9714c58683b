"""
Pydantic model for clients.
"""
from pydantic import Field

from .record import Record


class Client(Record):
    """Client record."""
    name: str = Field("", description="Client full name")
    email: str = Field("", description="Contact email address")
    phone: str = Field("", description="Contact phone number")
