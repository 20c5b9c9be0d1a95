"""Clock helpers shared by the layers that need a reference instant."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)
