"""
Aggregates the versioned API routers.
When a new resource is added, include its router here.
"""
from fastapi import APIRouter

from crudstore.api.routes import clients, health, items

router = APIRouter()

router.include_router(health.router)
router.include_router(items.router)
router.include_router(clients.router)
