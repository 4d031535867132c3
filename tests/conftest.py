from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--run-viewer",
        action="store_true",
        default=False,
        help="run tests that open a Raylib window",
    )


def pytest_configure(config: pytest.Config) -> None:
    # Ensure the local `src/` tree wins over any other editable install that may exist
    # (e.g. a different git worktree pointing at the same project).
    src_dir = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_dir)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)
    config.addinivalue_line("markers", "viewer: tests that open a Raylib window (opt-in)")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-viewer"):
        return
    skip_viewer = pytest.mark.skip(reason="use --run-viewer to run Raylib window tests")
    for item in items:
        if "viewer" in item.keywords:
            item.add_marker(skip_viewer)
