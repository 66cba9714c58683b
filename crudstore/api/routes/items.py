"""
Item API routes.
"""
from crudstore.api.crud_router import create_crud_router
from crudstore.dependencies.services import get_item_store
from crudstore.models import Item

router = create_crud_router(Item, label="Item", store_dependency=get_item_store, prefix="/items", tags=["items"])
