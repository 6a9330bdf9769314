from __future__ import annotations

ERR_CONFIG = 10
ERR_READ = 20
ERR_PARSE = 21
ERR_WRITE = 30
ERR_RENAME = 31
ERR_LIST = 40
ERR_INTERNAL = 99
