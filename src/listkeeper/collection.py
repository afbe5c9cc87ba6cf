from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import GuardReleasedError, InvalidRecordError
from .handlers import DataContainer, FileHandler, JsonHandler, load_container, store_container

T = TypeVar("T", bound=BaseModel)
Predicate = Callable[[T], bool]
Mutator = Callable[[T], None]

logger = logging.getLogger(__name__)


def _detach(record: T) -> T:
    return record.model_copy(deep=True)


def _position(records: List[T], predicate: Predicate) -> Optional[int]:
    for index, record in enumerate(records):
        if predicate(record):
            return index
    return None


class Collection(Generic[T]):
    """In-memory collection of Pydantic models mirrored to one JSON file.

    Parameters
    ----------
    model:
        Pydantic model type used to validate each record in the file.
    name:
        Collection name. The backing file is ``<directory>/<name>.json``.
    directory:
        Directory holding the backing file. It is not created: a missing file
        raises :class:`~listkeeper.exceptions.NotFoundError`.
    handler:
        File handler used to read and write the backing file. Defaults to
        :class:`~listkeeper.handlers.JsonHandler`.

    The whole file is read once on construction. Queries scan the in-memory
    sequence; every mutation rewrites the whole file before returning.

    Every operation runs under the collection's lock. The operations live on
    :class:`CollectionGuard`, which is only handed out by :meth:`locked`::

        with lists.locked() as guard:
            if guard.find_one(lambda item: item.id == list_id) is None:
                ...
            guard.append(new_list)

    The methods of the same name on ``Collection`` itself take the lock for a
    single call.
    """

    def __init__(
        self,
        model: type[T],
        name: str,
        directory: Path | str,
        *,
        handler: FileHandler | None = None,
    ) -> None:
        self.model = model
        self.name = name
        self.root = Path(directory).expanduser()
        self._handler = handler or JsonHandler()
        self.path = self.root / f"{name}{self._handler.extension}"
        self._lock = threading.Lock()
        self._container: DataContainer[T] = load_container(self.path, model, self._handler)
        logger.info(
            "Loaded collection '%s' with %d record(s) from %s",
            name,
            self._container.count,
            self.path,
        )

    def __repr__(self) -> str:
        return f"Collection({self.model.__name__}, name={self.name!r}, path='{self.path}')"

    @contextmanager
    def locked(self) -> Iterator["CollectionGuard[T]"]:
        """Hold the collection lock and yield the guard carrying its operations."""
        with self._lock:
            guard = CollectionGuard(self)
            try:
                yield guard
            finally:
                guard._release()

    # Single-call entrypoints -------------------------------------------
    def find_one(self, predicate: Predicate) -> Optional[T]:
        with self.locked() as guard:
            return guard.find_one(predicate)

    def find(self, predicate: Predicate) -> List[T]:
        with self.locked() as guard:
            return guard.find(predicate)

    def get_all(self) -> List[T]:
        with self.locked() as guard:
            return guard.get_all()

    def count(self) -> int:
        with self.locked() as guard:
            return guard.count()

    def append(self, record: T) -> None:
        with self.locked() as guard:
            guard.append(record)

    def delete_one(self, predicate: Predicate) -> Optional[T]:
        with self.locked() as guard:
            return guard.delete_one(predicate)

    def delete_many(self, predicate: Predicate) -> int:
        with self.locked() as guard:
            return guard.delete_many(predicate)

    def patch_one(self, predicate: Predicate, mutator: Mutator) -> Optional[T]:
        with self.locked() as guard:
            return guard.patch_one(predicate, mutator)

    def put_one(self, predicate: Predicate, record: T) -> T:
        with self.locked() as guard:
            return guard.put_one(predicate, record)

    # Internal helpers --------------------------------------------------
    def _save(self) -> None:
        # Memory is already updated; a failed write leaves it ahead of the file.
        self._container.count = len(self._container.data)
        store_container(self.path, self._container, self._handler)
        logger.debug(
            "Saved collection '%s' (%d record(s)) to %s",
            self.name,
            self._container.count,
            self.path,
        )


class CollectionGuard(Generic[T]):
    """Operations on a collection, valid only inside ``Collection.locked()``.

    Records returned by queries and mutations are copies. Changing them has
    no effect on the collection; use :meth:`patch_one` or :meth:`put_one`.
    """

    def __init__(self, collection: Collection[T]) -> None:
        self._collection = collection
        self._active = True

    # Queries -----------------------------------------------------------
    def find_one(self, predicate: Predicate) -> Optional[T]:
        """Return the first record matching ``predicate``, or ``None``."""
        for record in self._records():
            if predicate(record):
                return _detach(record)
        return None

    def find(self, predicate: Predicate) -> List[T]:
        """Return every record matching ``predicate`` in stored order."""
        return [_detach(record) for record in self._records() if predicate(record)]

    def get_all(self) -> List[T]:
        return [_detach(record) for record in self._records()]

    def count(self) -> int:
        return len(self._records())

    # Mutations ---------------------------------------------------------
    def append(self, record: T) -> None:
        """Add ``record`` at the end and save."""
        self._records().append(_detach(record))
        self._collection._save()

    def delete_one(self, predicate: Predicate) -> Optional[T]:
        """Remove and return the first match. Nothing is written without a match."""
        records = self._records()
        index = _position(records, predicate)
        if index is None:
            return None
        removed = records.pop(index)
        self._collection._save()
        return removed

    def delete_many(self, predicate: Predicate) -> int:
        """Remove every match, keeping survivors in order. Returns how many went."""
        records = self._records()
        kept = [record for record in records if not predicate(record)]
        removed = len(records) - len(kept)
        if removed:
            records[:] = kept
            self._collection._save()
        return removed

    def patch_one(self, predicate: Predicate, mutator: Mutator) -> Optional[T]:
        """Apply ``mutator`` to a copy of the first match, validate it and save.

        ``mutator`` changes the fields it cares about; its return value is
        ignored. It works on a copy, so keeping a reference to its argument
        gives no access to stored state. The patched copy is validated
        against the collection's model before it replaces the stored record;
        on :class:`~listkeeper.exceptions.InvalidRecordError` nothing is
        stored or written. Returns a copy of the updated record, or ``None``
        without writing when nothing matched.
        """
        records = self._records()
        index = _position(records, predicate)
        if index is None:
            return None
        draft = _detach(records[index])
        mutator(draft)
        try:
            patched = self._collection.model.model_validate(draft.model_dump(by_alias=True))
        except ValidationError as exc:
            raise InvalidRecordError(
                f"Patched record in collection '{self._collection.name}' is invalid: {exc}"
            ) from exc
        records[index] = patched
        self._collection._save()
        return _detach(patched)

    def put_one(self, predicate: Predicate, record: T) -> T:
        """Replace the first match with ``record``, or append it if none matched.

        The replacement always lands at the end of the sequence. Id
        uniqueness is left to callers.
        """
        records = self._records()
        index = _position(records, predicate)
        if index is not None:
            del records[index]
        records.append(_detach(record))
        self._collection._save()
        return _detach(record)

    # Utilities ---------------------------------------------------------
    def _records(self) -> List[T]:
        if not self._active:
            raise GuardReleasedError(
                f"Guard for collection '{self._collection.name}' used after its lock was released"
            )
        return self._collection._container.data

    def _release(self) -> None:
        self._active = False
