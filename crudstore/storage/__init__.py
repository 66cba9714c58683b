"""
Storage abstraction layer.
Provides a generic keyed-record contract and an in-memory implementation.
"""
from .interface import Store
from .identity import IdentityPolicy
from .rwlock import ReadWriteLock
from .memory_store import MemoryStore

__all__ = ['Store', 'IdentityPolicy', 'ReadWriteLock', 'MemoryStore']
