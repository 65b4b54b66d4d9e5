from datetime import datetime, timezone
from typing import Any


def number_to_text(value: Any) -> Any:
    """Forms often post weights as numbers; they are stored as free text."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def as_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; give them an explicit offset on the way out."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
