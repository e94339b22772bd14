# stockwise/api/records.py

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from ..store import RecordStore
from .deps import get_store, require_member

router = APIRouter(
    prefix="/api/records",
    tags=["records"],
    dependencies=[Depends(require_member)],
)


@router.get("/{collection}")
async def list_records(collection: str, store: RecordStore = Depends(get_store)):
    """Every record of the collection, unordered."""
    result = await store.list_all(collection)
    return {"items": result.items}


@router.post("/{collection}", status_code=201)
async def create_record(
    collection: str,
    record: Dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_store),
):
    """The payload must carry its own `id`."""
    return await store.create(collection, record)


@router.put("/{collection}/{record_id}")
async def replace_record(
    collection: str,
    record_id: str,
    record: Dict[str, Any] = Body(...),
    store: RecordStore = Depends(get_store),
):
    """Full replacement; fields left out fall back to their defaults."""
    return await store.update(collection, {**record, "id": record_id})


@router.delete("/{collection}/{record_id}")
async def delete_record(
    collection: str,
    record_id: str,
    store: RecordStore = Depends(get_store),
):
    await store.delete(collection, record_id)
    return {"status": "deleted", "id": record_id}
