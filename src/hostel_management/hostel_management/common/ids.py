from __future__ import annotations

import re
import secrets
import string
from datetime import datetime

from .datetime_utils import epoch_millis, now_utc

_BASE36 = string.digits + string.ascii_lowercase


def random_suffix(length: int = 9) -> str:
    return "".join(secrets.choice(_BASE36) for _ in range(length))


def new_id(prefix: str, *, now: datetime | None = None) -> str:
    """``PREFIX-<epoch ms>-<9 base36 chars>``, e.g. ``ORD-1717000000000-k3j9x0q1a``."""
    return f"{prefix}-{epoch_millis(now or now_utc())}-{random_suffix()}"


def slugify(name: str) -> str:
    """Branch ids: lower-cased name with whitespace runs replaced by ``-``."""
    return re.sub(r"\s+", "-", name.strip().lower())
