import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return uuid.uuid4().hex


def utcnow() -> datetime:
    # Naive UTC: SQLite drops tzinfo on the way back, so keep both sides comparable.
    return datetime.now(timezone.utc).replace(tzinfo=None)
