from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Generic, TypeVar

import orjson
from pydantic import BaseModel, ValidationError

from .exceptions import NotFoundError, ParseError, StorageIOError

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class DataContainer(BaseModel, Generic[T]):
    """Envelope written to and read from a collection file.

    ``count`` mirrors ``len(data)`` for people reading the file by hand. It is
    recomputed before every save and ignored on load.
    """

    count: int
    data: list[T]


class FileHandler(ABC):
    """Abstract interface for translating between files and dictionaries."""

    extension: str

    @abstractmethod
    def read(self, path: Path) -> Any:
        """Read the whole file and return the decoded payload."""

    @abstractmethod
    def write(self, path: Path, data: Mapping[str, Any]) -> None:
        """Overwrite the file with the encoded payload."""


class JsonHandler(FileHandler):
    extension = ".json"

    def read(self, path: Path) -> Any:
        return orjson.loads(path.read_bytes())

    def write(self, path: Path, data: Mapping[str, Any]) -> None:
        with path.open("wb") as fh:
            fh.write(orjson.dumps(data, option=orjson.OPT_INDENT_2))
            fh.write(b"\n")


def load_container(
    path: Path,
    model: type[T],
    handler: FileHandler | None = None,
) -> DataContainer[T]:
    """Read ``path`` and validate it as a container of ``model`` records."""
    handler = handler or JsonHandler()
    try:
        payload = handler.read(path)
    except FileNotFoundError as exc:
        raise NotFoundError(f"Collection file '{path}' does not exist") from exc
    except orjson.JSONDecodeError as exc:
        raise ParseError(f"Collection file '{path}' is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise StorageIOError(f"Could not read collection file '{path}': {exc}") from exc

    try:
        container = DataContainer[model].model_validate(payload)
    except ValidationError as exc:
        raise ParseError(
            f"Collection file '{path}' does not hold {model.__name__} records: {exc}"
        ) from exc
    container.count = len(container.data)
    return container


def store_container(
    path: Path,
    container: DataContainer[T],
    handler: FileHandler | None = None,
) -> None:
    """Overwrite ``path`` with the whole container in one shot."""
    handler = handler or JsonHandler()
    data = container.model_dump(mode="json", by_alias=True)
    try:
        handler.write(path, data)
    except OSError as exc:
        logger.error("Failed to write %s", path, exc_info=True)
        raise StorageIOError(f"Could not write collection file '{path}': {exc}") from exc
