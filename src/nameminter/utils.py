from __future__ import annotations

import base64
import json
from typing import Any


def compact_json(payload: Any) -> bytes:
    """Serialize to the compact UTF-8 JSON form contracts expect on the wire."""
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def base64_encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def base64_decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.b64decode(value + padding)
