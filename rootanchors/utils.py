import logging
import re
import time
from contextlib import ContextDecorator
from datetime import datetime, timezone
from typing import Optional

RFC3339_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})"
)


class cmtimer(ContextDecorator):
    def __init__(self, msg, logger=None):
        self.msg = msg
        self.logger = logger or logging.getLogger(__name__)

    def __enter__(self):
        self.time = time.perf_counter()
        return self

    def __exit__(self, type, value, traceback):
        elapsed = time.perf_counter() - self.time
        self.logger.debug(f"{self.msg} took {elapsed:.3f} seconds")


def parse_timestamp(value: str) -> datetime:
    """Parse RFC 3339 date-time, offset required as either +HH:MM or Z"""
    if not RFC3339_RE.fullmatch(value):
        raise ValueError(f"Timestamp not in RFC 3339 format: {value!r}")
    return datetime.fromisoformat(value)


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S+00:00")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
