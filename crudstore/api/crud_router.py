"""
Generic CRUD router.

``create_crud_router`` exposes the five store operations for any record shape,
so a new resource needs a record model, a store and one call here.
"""
import logging
from typing import Callable, List, Optional, Type

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from crudstore.models.record import Record
from crudstore.storage.interface import Store

logger = logging.getLogger(__name__)


def create_crud_router(
    record_type: Type[Record],
    label: str,
    store_dependency: Callable[[], Store],
    prefix: str,
    tags: Optional[List[str]] = None,
) -> APIRouter:
    """
    Build list/get/create/update/delete routes for one resource.

    Args:
        record_type: Record subclass decoded from request bodies
        label: Human readable name used in error messages (e.g. "Item")
        store_dependency: FastAPI dependency returning the resource's store
        prefix: Collection path (e.g. "/items")
        tags: OpenAPI tags

    Returns:
        Router with routes registered under ``prefix``
    """
    router = APIRouter(prefix=prefix, tags=tags or [])
    resource = prefix.strip("/").replace("/", "_")
    not_found = f"{label} not found"

    @router.get("", response_model=List[record_type], name=f"list_{resource}")
    def list_records(store: Store = Depends(store_dependency)):
        """List every record in the collection."""
        return store.list_all()

    @router.get("/{record_id}", response_model=record_type, name=f"get_{resource}")
    def get_record(
        record_id: str = Path(..., description="Record ID"),
        store: Store = Depends(store_dependency),
    ):
        """Get a record by ID."""
        record = store.get_by_id(record_id)
        if record is None:
            raise HTTPException(status_code=404, detail=not_found)
        return record

    @router.post("", response_model=record_type, status_code=201, name=f"create_{resource}")
    def create_record(
        payload: record_type,
        store: Store = Depends(store_dependency),
    ):
        """Create a record. ID and timestamps in the payload are ignored."""
        record = store.create(payload)
        logger.info(f"Created {label} {record.id}")
        return record

    @router.put("/{record_id}", response_model=record_type, name=f"update_{resource}")
    def update_record(
        payload: record_type,
        record_id: str = Path(..., description="Record ID"),
        store: Store = Depends(store_dependency),
    ):
        """Replace a record. Fields missing from the payload are cleared."""
        record = store.update(record_id, payload)
        if record is None:
            raise HTTPException(status_code=404, detail=not_found)
        logger.info(f"Updated {label} {record_id}")
        return record

    @router.delete("/{record_id}", status_code=204, response_class=Response, name=f"delete_{resource}")
    def delete_record(
        record_id: str = Path(..., description="Record ID"),
        store: Store = Depends(store_dependency),
    ):
        """Delete a record."""
        if not store.delete_by_id(record_id):
            raise HTTPException(status_code=404, detail=not_found)
        logger.info(f"Deleted {label} {record_id}")
        return Response(status_code=204)

    return router
