from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_CONFIG, ERR_INTERNAL, ERR_LIST, ERR_PARSE, ERR_READ, ERR_RENAME, ERR_WRITE


@dataclass
class FileAccessError(Exception):
    message: str
    code: int = ERR_INTERNAL
    kind: str = "generic_error"
    path: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass
class ReadError(FileAccessError):
    code: int = ERR_READ
    kind: str = "read_error"


@dataclass
class ParseError(FileAccessError):
    code: int = ERR_PARSE
    kind: str = "parse_error"


@dataclass
class WriteError(FileAccessError):
    code: int = ERR_WRITE
    kind: str = "write_error"


@dataclass
class RenameError(FileAccessError):
    code: int = ERR_RENAME
    kind: str = "rename_error"
    target: str | None = None


@dataclass
class ListError(FileAccessError):
    code: int = ERR_LIST
    kind: str = "list_error"


@dataclass
class ConfigError(FileAccessError):
    code: int = ERR_CONFIG
    kind: str = "config_error"
