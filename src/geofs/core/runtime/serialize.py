"""Canonical JSON serialization helpers.

Only strict JSON is written or accepted: `NaN` and the infinities are
rejected in both directions.
"""

from __future__ import annotations

import json
from typing import Any


def _reject_constant(token: str) -> Any:
    raise ValueError(f"invalid JSON constant: {token}")


def dumps_json(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), allow_nan=False)


def loads_json(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)
