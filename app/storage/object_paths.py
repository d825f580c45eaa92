import time
from pathlib import PurePath

UPLOADS_STAGE = "uploads"
PROCESSED_STAGE = "processed"


def object_name(filename: str, timestamp_ms: int | None = None) -> str:
    """Build a collision-resistant object name: {unixMillis}-{filename}"""
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    return f"{timestamp_ms}-{PurePath(filename).name}"


def stage_path(stage: str, name: str) -> str:
    """Build a storage key: {stage}/{name}"""
    return f"{stage}/{name}"
