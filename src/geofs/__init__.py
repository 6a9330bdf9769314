__version__ = "0.1.0"

from .core.context import FacadeContext
from .core.errors import (
    ConfigError,
    FileAccessError,
    ListError,
    ParseError,
    ReadError,
    RenameError,
    WriteError,
)
from .fs import FileAccess

__all__ = [
    "__version__",
    "ConfigError",
    "FacadeContext",
    "FileAccess",
    "FileAccessError",
    "ListError",
    "ParseError",
    "ReadError",
    "RenameError",
    "WriteError",
]
