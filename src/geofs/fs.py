"""Asynchronous file access facade for geographic input data.

Every public method performs one filesystem call in a worker thread, logs a
single `error` event naming the action and resolved path on failure, and
raises the matching `FileAccessError` subclass chained to the original error.
"""

from __future__ import annotations

import asyncio
import codecs
import os
from pathlib import Path
from typing import Any

from .core.context import FacadeContext
from .core.errors import ListError, ParseError, ReadError, RenameError, WriteError
from .core.runtime.logging import log_event
from .core.runtime.serialize import dumps_json, loads_json

COMPONENT = "geofs.fs"

JSON_SUFFIX = ".json"
PRJ_SUFFIX = ".prj"
GEOJSON_SUFFIX = ".geojson"


def _read_file(target: str, encoding: str) -> str:
    with open(target, "r", encoding=encoding, newline="") as handle:
        return handle.read()


def _write_file(target: str, text: str, encoding: str) -> None:
    with open(target, "w", encoding=encoding, newline="") as handle:
        handle.write(text)


def _same_codec(left: str, right: str) -> bool:
    try:
        return codecs.lookup(left).name == codecs.lookup(right).name
    except LookupError:
        return left.lower() == right.lower()


class FileAccess:
    def __init__(self, ctx: FacadeContext | None = None) -> None:
        self.ctx = ctx or FacadeContext.from_args()

    def resolve(self, name: str, path: str | Path | None = None) -> str:
        """Join `name` onto `path`, falling back to the context input root.

        String paths are concatenated as given, so they need their own
        trailing separator. `Path` values are joined with `/`.
        """
        base = path or self.ctx.input_root
        if isinstance(base, Path):
            return str(base / name)
        return f"{base}{name}"

    async def read_text(self, name: str, path: str | Path | None = None, encoding: str | None = None) -> str:
        """Read `path + name` as text.

        `encoding` is accepted for compatibility but decoding always uses the
        context encoding; a differing value is reported as a debug event.
        """
        target = self.resolve(name, path)
        if encoding is not None and not _same_codec(encoding, self.ctx.encoding):
            log_event(
                self.ctx,
                "debug",
                COMPONENT,
                "encoding_ignored",
                path=target,
                requested=encoding,
                used=self.ctx.encoding,
            )
        return await self._read(target, "read")

    async def read_json(self, name: str, path: str | Path | None = None) -> Any:
        return await self._read_structured(self.resolve(name + JSON_SUFFIX, path), "read_json")

    async def read_prj(self, name: str, path: str | Path | None = None) -> str:
        # prj content is opaque projection text
        return await self._read(self.resolve(name + PRJ_SUFFIX, path), "read_prj")

    async def read_geojson(self, name: str, path: str | Path | None = None) -> Any:
        return await self._read_structured(self.resolve(name + GEOJSON_SUFFIX, path), "read_geojson")

    async def list_directory(self, path: str | Path) -> list[str]:
        if path is None:
            raise TypeError("list_directory requires a directory path")
        target = str(path)
        try:
            names = await asyncio.to_thread(os.listdir, target)
        except (OSError, ValueError) as exc:
            log_event(self.ctx, "error", COMPONENT, "list", path=target, error=str(exc))
            raise ListError(f"error reading files in {target}: {exc}", path=target) from exc
        log_event(self.ctx, "debug", COMPONENT, "list", path=target, entries=len(names))
        return sorted(names)

    async def write_text(self, name: str, text: str, path: str | Path | None = None) -> None:
        if not isinstance(text, str):
            raise TypeError(f"write_text expects str, got {type(text).__name__}; use write_json for structured data")
        await self._write(self.resolve(name, path), text, "write")

    async def write_json(self, name: str, payload: Any, path: str | Path | None = None) -> None:
        target = self.resolve(name, path)
        try:
            text = dumps_json(payload)
        except (TypeError, ValueError, RecursionError) as exc:
            log_event(self.ctx, "error", COMPONENT, "write_json", path=target, error=str(exc))
            raise WriteError(
                f"error serializing data for {target}: {exc}",
                kind="serialize_error",
                path=target,
            ) from exc
        await self._write(target, text, "write_json")

    async def rename_file(self, old_name: str, new_name: str, path: str | Path) -> None:
        if path is None:
            raise TypeError("rename_file requires a directory path")
        base = str(path).removesuffix("/")
        source = f"{base}/{old_name}"
        target = f"{base}/{new_name}"
        try:
            await asyncio.to_thread(os.rename, source, target)
        except (OSError, ValueError) as exc:
            log_event(self.ctx, "error", COMPONENT, "rename", path=source, target=target, error=str(exc))
            raise RenameError(
                f"error renaming file from {source} to {target}: {exc}",
                path=source,
                target=target,
            ) from exc
        log_event(self.ctx, "debug", COMPONENT, "rename", path=source, target=target)

    async def _read(self, target: str, action: str) -> str:
        try:
            text = await asyncio.to_thread(_read_file, target, self.ctx.encoding)
        except (OSError, ValueError) as exc:
            log_event(self.ctx, "error", COMPONENT, action, path=target, error=str(exc))
            raise ReadError(f"error reading file {target}: {exc}", path=target) from exc
        log_event(self.ctx, "debug", COMPONENT, action, path=target, chars=len(text))
        return text

    async def _read_structured(self, target: str, action: str) -> Any:
        text = await self._read(target, action)
        try:
            return loads_json(text)
        except (ValueError, RecursionError) as exc:
            log_event(self.ctx, "error", COMPONENT, action, path=target, error=str(exc))
            raise ParseError(f"error parsing {target}: {exc}", path=target) from exc

    async def _write(self, target: str, text: str, action: str) -> None:
        try:
            await asyncio.to_thread(_write_file, target, text, self.ctx.encoding)
        except (OSError, ValueError) as exc:
            log_event(self.ctx, "error", COMPONENT, action, path=target, error=str(exc))
            raise WriteError(f"error writing file {target}: {exc}", path=target) from exc
        log_event(self.ctx, "debug", COMPONENT, action, path=target, chars=len(text))
