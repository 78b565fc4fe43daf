from __future__ import annotations

import time
from uuid import uuid4


def generate_result_id() -> str:
    """Return ``<epoch millis>-<12 hex chars>``.

    The random part is 48 bits drawn from ``uuid4`` (os.urandom), which is
    safe to call from several threads at once.
    """
    millis = time.time_ns() // 1_000_000
    return f"{millis}-{uuid4().hex[:12]}"
