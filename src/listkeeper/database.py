from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

from pydantic import BaseModel

from .collection import Collection
from .exceptions import UnknownCollectionError
from .handlers import FileHandler
from .models import Entry, TodoList

logger = logging.getLogger(__name__)

COLLECTION_REGISTRY: Mapping[str, type[BaseModel]] = {
    "list": TodoList,
    "entry": Entry,
}


class Database:
    """One :class:`~listkeeper.collection.Collection` per entity kind.

    Parameters
    ----------
    directory:
        Directory holding one ``<kind>.json`` file per registered kind.
    kinds:
        Mapping of kind name to record model. Defaults to
        :data:`COLLECTION_REGISTRY` (``"list"`` and ``"entry"``).
    handler:
        File handler shared by every collection.

    Construction is all-or-nothing: if any collection file is missing or
    unreadable the error propagates and no database is returned. Build one
    instance at startup and pass it to whatever needs it.
    """

    def __init__(
        self,
        directory: Path | str,
        *,
        kinds: Optional[Mapping[str, type[BaseModel]]] = None,
        handler: Optional[FileHandler] = None,
    ) -> None:
        self.root = Path(directory).expanduser()
        registry = COLLECTION_REGISTRY if kinds is None else kinds
        self._collections: Dict[str, Collection] = {
            kind: Collection(model, kind, self.root, handler=handler)
            for kind, model in registry.items()
        }
        logger.info("Opened database at %s with kinds %s", self.root, ", ".join(self.kinds))

    @property
    def kinds(self) -> tuple[str, ...]:
        return tuple(self._collections)

    def collection(self, kind: str) -> Collection:
        """Return the shared collection for ``kind``."""
        try:
            return self._collections[kind]
        except KeyError as exc:
            raise UnknownCollectionError(f"Unknown collection '{kind}'") from exc

    @property
    def lists(self) -> Collection[TodoList]:
        return self.collection("list")

    @property
    def entries(self) -> Collection[Entry]:
        return self.collection("entry")
