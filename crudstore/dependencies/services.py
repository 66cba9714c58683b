"""
Service container for dependency injection.
Owns one store per resource for the lifetime of the process.
"""
import logging
import threading
from typing import Optional

from crudstore.models import Client, Item
from crudstore.storage import MemoryStore

logger = logging.getLogger(__name__)

# Global service instance
_service_instance: Optional['ServiceContainer'] = None
_service_lock = threading.Lock()


class ServiceContainer:
    """Container for all resource stores."""

    def __init__(self):
        self.items: MemoryStore[Item] = MemoryStore(Item)
        self.clients: MemoryStore[Client] = MemoryStore(Client)
        logger.info("Initialized in-memory stores: items, clients")


def get_services() -> ServiceContainer:
    """Get the global service container instance."""
    global _service_instance
    if _service_instance is None:
        with _service_lock:
            if _service_instance is None:
                _service_instance = ServiceContainer()
    return _service_instance


def reset_services() -> None:
    """Discard the global container so the next access starts empty."""
    global _service_instance
    with _service_lock:
        _service_instance = None


def get_item_store() -> MemoryStore[Item]:
    """Get the items store from the service container."""
    return get_services().items


def get_client_store() -> MemoryStore[Client]:
    """Get the clients store from the service container."""
    return get_services().clients
