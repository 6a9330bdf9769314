from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .run_id import make_run_id

LogLevel = Literal["debug", "info", "warning", "error"]

DEFAULT_INPUT_ROOT = "./data/input/"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class FacadeContext:
    run_id: str
    input_root: str = DEFAULT_INPUT_ROOT
    encoding: str = DEFAULT_ENCODING
    log_json: bool = True
    log_level: LogLevel = "info"

    @classmethod
    def from_args(
        cls,
        input_root: str | None = None,
        encoding: str | None = None,
        run_id: str | None = None,
        log_json: bool = True,
        log_level: LogLevel = "info",
    ) -> "FacadeContext":
        return cls(
            run_id=run_id or make_run_id(),
            input_root=input_root or DEFAULT_INPUT_ROOT,
            encoding=encoding or DEFAULT_ENCODING,
            log_json=log_json,
            log_level=log_level,
        )
