"""Routes for todo lists."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from listkeeper.api.dependencies import get_database
from listkeeper.api.schemas import ListCreateRequest, ListPatchRequest, ListPutRequest
from listkeeper.database import Database
from listkeeper.models import Entry, TodoList
from listkeeper.nested import NestedRecord, fetch_nested
from listkeeper.utils import new_id

logger = logging.getLogger(__name__)

router = APIRouter(tags=["lists"])


@router.get("", response_model=List[TodoList])
def get_lists(db: Database = Depends(get_database)):
    """List every todo list."""
    return db.lists.get_all()


@router.get("/{list_id}", response_model=TodoList)
def get_list(list_id: str, db: Database = Depends(get_database)):
    todo_list = db.lists.find_one(lambda item: item.id == list_id)
    if todo_list is None:
        raise HTTPException(status_code=404, detail="not found")
    return todo_list


@router.get("/{list_id}/entries", response_model=NestedRecord[TodoList, Entry])
def get_list_and_its_entries(list_id: str, db: Database = Depends(get_database)):
    """Return the list as ``parent`` and its entries as ``children``."""
    nested = fetch_nested(db.lists, db.entries, list_id, foreign_key="list_id")
    if nested is None:
        raise HTTPException(status_code=404, detail="not found")
    return nested


@router.post("", response_model=TodoList, status_code=201)
def post_list(body: ListCreateRequest, db: Database = Depends(get_database)):
    todo_list = TodoList(id=new_id(), name=body.name)
    db.lists.append(todo_list)
    logger.info("Created list %s", todo_list.id)
    return todo_list


@router.patch("/{list_id}", response_model=TodoList)
def patch_list(list_id: str, body: ListPatchRequest, db: Database = Depends(get_database)):
    def apply(item: TodoList) -> None:
        if body.name is not None:
            item.name = body.name

    updated = db.lists.patch_one(lambda item: item.id == list_id, apply)
    if updated is None:
        raise HTTPException(status_code=404, detail="not found")
    return updated


@router.put("/{list_id}", response_model=TodoList)
def put_list(list_id: str, body: ListPutRequest, db: Database = Depends(get_database)):
    """Create or replace the list stored under ``list_id``."""
    return db.lists.put_one(
        lambda item: item.id == list_id,
        TodoList(id=list_id, name=body.name),
    )


@router.delete("/{list_id}", status_code=204)
def delete_list(list_id: str, db: Database = Depends(get_database)):
    """Delete the list's entries, then the list itself."""
    removed = db.entries.delete_many(lambda item: item.list_id == list_id)
    deleted = db.lists.delete_one(lambda item: item.id == list_id)
    if deleted is None:
        raise HTTPException(status_code=404, detail="not found")
    logger.info("Deleted list %s and %d of its entries", list_id, removed)
    return Response(status_code=204)
