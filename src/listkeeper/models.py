"""Entity schemas stored by the todo backend.

Records are plain Pydantic models. Field names are camelCase on disk and on
the wire, and the identifier is stored under ``_id``; Python code may use
either the field name or the alias when constructing a record.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")


class TodoList(Record):
    name: str


class Entry(Record):
    list_id: str
    name: str
    done: bool = False
