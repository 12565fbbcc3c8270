"""
Id and clock helpers shared by the mutation handlers.
"""
import threading
import time
from datetime import datetime, timezone
from typing import Container

_lock = threading.Lock()
_last_stamp = 0


def new_id(prefix: str, taken: Container[str] = ()) -> str:
    """
    Generate a timestamp-based id such as "p1735117200123".

    Stamps are strictly increasing within the process and skip any value
    already present in `taken`, so a fresh id never collides with existing
    records even when the clock stalls or data was seeded with stamp-like ids.
    """
    global _last_stamp
    with _lock:
        stamp = max(time.time_ns() // 1_000_000, _last_stamp + 1)
        while f"{prefix}{stamp}" in taken:
            stamp += 1
        _last_stamp = stamp
    return f"{prefix}{stamp}"


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def to_timestamp(value) -> float:
    """
    Convert an ISO date or timestamp string to epoch seconds.

    Date-only values are read as UTC midnight. Missing or unparseable values
    map to 0 (the epoch).
    """
    if not value:
        return 0.0
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return 0.0
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()
