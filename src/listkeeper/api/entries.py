"""Routes for list entries."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from listkeeper.api.dependencies import get_database
from listkeeper.api.schemas import EntryCreateRequest, EntryPatchRequest, EntryPutRequest
from listkeeper.database import Database
from listkeeper.models import Entry
from listkeeper.utils import new_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["entries"])


def _require_list(db: Database, list_id: str) -> None:
    if db.lists.find_one(lambda item: item.id == list_id) is None:
        raise HTTPException(status_code=404, detail="list not found")


@router.get("", response_model=List[Entry])
def get_entries(db: Database = Depends(get_database)):
    return db.entries.get_all()


@router.get("/{entry_id}", response_model=Entry)
def get_entry(entry_id: str, db: Database = Depends(get_database)):
    entry = db.entries.find_one(lambda item: item.id == entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="not found")
    return entry


@router.post("", response_model=Entry, status_code=201)
def post_entry(body: EntryCreateRequest, db: Database = Depends(get_database)):
    """Add an entry to an existing list."""
    _require_list(db, body.list_id)
    entry = Entry(
        id=new_id(),
        list_id=body.list_id,
        name=body.name,
        done=bool(body.done),
    )
    db.entries.append(entry)
    logger.info("Created entry %s in list %s", entry.id, entry.list_id)
    return entry


@router.patch("/{entry_id}", response_model=Entry)
def patch_entry(entry_id: str, body: EntryPatchRequest, db: Database = Depends(get_database)):
    """Update the given fields. Moving to another list requires that list to exist."""
    if body.list_id is not None:
        _require_list(db, body.list_id)

    def apply(item: Entry) -> None:
        if body.list_id is not None:
            item.list_id = body.list_id
        if body.name is not None:
            item.name = body.name
        if body.done is not None:
            item.done = body.done

    updated = db.entries.patch_one(lambda item: item.id == entry_id, apply)
    if updated is None:
        raise HTTPException(status_code=404, detail="not found")
    return updated


@router.put("/{entry_id}", response_model=Entry)
def put_entry(entry_id: str, body: EntryPutRequest, db: Database = Depends(get_database)):
    _require_list(db, body.list_id)
    return db.entries.put_one(
        lambda item: item.id == entry_id,
        Entry(id=entry_id, list_id=body.list_id, name=body.name, done=body.done),
    )


@router.delete("/{entry_id}", status_code=204)
def delete_entry(entry_id: str, db: Database = Depends(get_database)):
    if db.entries.delete_one(lambda item: item.id == entry_id) is None:
        raise HTTPException(status_code=404, detail="not found")
    return Response(status_code=204)
