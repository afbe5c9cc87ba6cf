"""Request bodies accepted by the list and entry routes."""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestBody(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListCreateRequest(RequestBody):
    name: str


class ListPatchRequest(RequestBody):
    name: Optional[str] = None


class ListPutRequest(RequestBody):
    name: str


class EntryCreateRequest(RequestBody):
    list_id: str
    name: str
    done: Optional[bool] = None


class EntryPatchRequest(RequestBody):
    """Partial update; fields left out (or null) keep their stored value."""
    list_id: Optional[str] = None
    name: Optional[str] = None
    done: Optional[bool] = None


class EntryPutRequest(RequestBody):
    list_id: str
    name: str
    done: bool
