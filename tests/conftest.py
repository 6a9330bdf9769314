from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import settings

from geofs.core.context import FacadeContext
from geofs.fs import FileAccess

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

settings.register_profile("geofs", deadline=None, max_examples=50)
settings.load_profile("geofs")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture
def data_root(tmp_path: Path) -> Path:
    root = tmp_path / "data" / "input"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def ctx(data_root: Path) -> FacadeContext:
    return FacadeContext.from_args(input_root=f"{data_root}/", run_id="t-run")


@pytest.fixture
def facade(ctx: FacadeContext) -> FileAccess:
    return FileAccess(ctx)

