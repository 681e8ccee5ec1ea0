"""
Document helpers
Lessons, comments and reports are stored as the client sent them; the server
only owns the document ID and the creation stamp.
"""

from datetime import datetime, timezone
from typing import Any, Dict

SERVER_STAMPED_FIELDS = ("id", "createdAt")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def stamped(body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Copy a submitted document and stamp its creation time.

    Every submitted key is kept with its value untouched (nulls and non-string
    values included); client values for ``id`` and ``createdAt`` are replaced.

    Args:
        body: Submitted JSON object

    Returns:
        Document ready for storage
    """
    data = {k: v for k, v in body.items() if k not in SERVER_STAMPED_FIELDS}
    data["createdAt"] = utcnow()
    return data
