from __future__ import annotations

from uuid import uuid4


def new_id() -> str:
    """Generate a fresh record identifier (hyphenated UUID4)."""
    return str(uuid4())
