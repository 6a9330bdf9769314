from __future__ import annotations

import secrets
from datetime import datetime, timezone


def make_run_id(prefix: str = "geofs") -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{stamp}-{secrets.token_hex(4)}"
