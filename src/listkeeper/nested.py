from __future__ import annotations

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from .collection import Collection

P = TypeVar("P", bound=BaseModel)
C = TypeVar("C", bound=BaseModel)


class NestedRecord(BaseModel, Generic[P, C]):
    """A parent record together with the child records pointing at it."""

    parent: P
    children: List[C]


def fetch_nested(
    parents: Collection[P],
    children: Collection[C],
    parent_id: str,
    foreign_key: str,
) -> Optional[NestedRecord[P, C]]:
    """Load the parent with ``id == parent_id`` and its children.

    Parameters
    ----------
    parents:
        Collection holding the parent record.
    children:
        Collection holding the child records.
    parent_id:
        Identifier of the parent to look up.
    foreign_key:
        Attribute on child records that stores the parent identifier
        (e.g. ``"list_id"``).

    The two collections are locked one after the other, never together, so
    the children are read in a separate step from the parent. Returns
    ``None`` when the parent does not exist.
    """
    with parents.locked() as guard:
        parent = guard.find_one(lambda item: item.id == parent_id)
    if parent is None:
        return None

    with children.locked() as guard:
        matches = guard.find(lambda item: getattr(item, foreign_key) == parent_id)
    return NestedRecord[parents.model, children.model](parent=parent, children=matches)
