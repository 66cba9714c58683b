"""
Client API routes.
"""
from crudstore.api.crud_router import create_crud_router
from crudstore.dependencies.services import get_client_store
from crudstore.models import Client

router = create_crud_router(
    Client, label="Client", store_dependency=get_client_store, prefix="/clients", tags=["clients"]
)
