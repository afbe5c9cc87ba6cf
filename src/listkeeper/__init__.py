"""
JSON-file backed store for a small todo-list REST backend.

The public API centers around :class:`Collection`, an in-memory list of
Pydantic models mirrored to one JSON file and guarded by a lock, and
:class:`Database`, which holds one collection per entity kind.
"""

from .collection import Collection, CollectionGuard
from .database import Database
from .handlers import DataContainer, FileHandler, JsonHandler
from .models import Entry, TodoList

__all__ = (
    "Collection",
    "CollectionGuard",
    "DataContainer",
    "Database",
    "Entry",
    "FileHandler",
    "JsonHandler",
    "TodoList",
)
