"""Process-generated integer identifiers.

Ids are wall-clock milliseconds. Batch-generated siblings take small offsets
from a shared base. The base is bumped past every id already present in the
working set, so ids are unique within that set; nothing here promises global
monotonicity.
"""
import time
from typing import Iterable, Optional


def now_ms() -> int:
    return int(time.time() * 1000)


def id_base(existing: Optional[Iterable[int]] = None) -> int:
    """Return a base id strictly greater than every id in `existing`."""
    base = now_ms()
    for value in existing or ():
        try:
            if int(value) >= base:
                base = int(value) + 1
        except (TypeError, ValueError):
            continue
    return base


def new_id(existing: Optional[Iterable[int]] = None, offset: int = 0) -> int:
    return id_base(existing) + offset


__all__ = ["now_ms", "id_base", "new_id"]
