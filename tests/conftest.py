from __future__ import annotations

from pathlib import Path

import pytest

from restrictedstr import PathStr, to_path_str

TESTS_DIR = Path(__file__).resolve().parent

SLOW_FILES = (
    TESTS_DIR / "test_large_inputs.py",
)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    for item in items:
        path = Path(str(item.fspath)).resolve()
        if path in SLOW_FILES:
            item.add_marker(pytest.mark.slow)


@pytest.fixture
def abc() -> PathStr:
    return to_path_str("abc")
