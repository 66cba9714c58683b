"""
Service container and FastAPI dependency providers.
"""
from .services import (
    ServiceContainer,
    get_services,
    reset_services,
    get_item_store,
    get_client_store,
)

__all__ = [
    "ServiceContainer",
    "get_services",
    "reset_services",
    "get_item_store",
    "get_client_store",
]
