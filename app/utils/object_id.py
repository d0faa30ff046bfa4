# app/utils/object_id.py
from typing import Any, Dict


def stringify_id(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of a MongoDB document with ``_id`` exposed as a string ``id``."""
    out = {k: v for k, v in document.items() if k != "_id"}
    if "_id" in document:
        out["id"] = str(document["_id"])
    return out
