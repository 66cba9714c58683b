"""
crudstore - uniform CRUD over independent in-memory resource collections.

Each resource (items, clients, ...) is backed by its own generic keyed store
and exposed over HTTP under ``/api/v1``.
"""

__version__ = "0.1.0"
