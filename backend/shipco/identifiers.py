"""Tracking numbers and event ids drawn from an unambiguous alphabet."""

from __future__ import annotations

import secrets
import time

# Upper-case letters and digits without I, O, 0 and 1.
ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
SUFFIX_LENGTH = 10
TRACKING_PREFIX = "SC"

_BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _random_suffix(size: int = SUFFIX_LENGTH) -> str:
    return "".join(secrets.choice(ALPHABET) for _ in range(size))


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError("value must be non-negative")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def new_tracking_number() -> str:
    millis = time.time_ns() // 1_000_000
    return TRACKING_PREFIX + to_base36(millis) + _random_suffix()


def new_event_id() -> str:
    return _random_suffix()
