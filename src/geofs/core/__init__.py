"""geofs core package."""
from .config import load_context
from .context import FacadeContext
from .run_id import make_run_id
from .runtime.clock import utc_now_iso
from .runtime.logging import log_event
from .runtime.serialize import dumps_json

__all__ = [
    "FacadeContext",
    "dumps_json",
    "load_context",
    "log_event",
    "make_run_id",
    "utc_now_iso",
]
