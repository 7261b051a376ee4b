"""Shared pytest configuration and fixtures for all tests."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# pytest's recursive tmp_path cleanup must be able to remove the very deep
# directory tree built by test_list_source_files_very_deep_tree.
sys.setrecursionlimit(max(sys.getrecursionlimit(), 10000))


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of single components")
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI")
    config.addinivalue_line("markers", "scan: tests of the styledscan.api.scan package")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def _write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def run_cmd() -> Callable:
    return _run_cmd


@pytest.fixture
def write_tree() -> Callable[[Path, dict[str, str]], Path]:
    return _write_tree


@pytest.fixture
def src_root(tmp_path: Path) -> Path:
    """Empty ``src`` directory to scan."""
    root = tmp_path / "src"
    root.mkdir()
    return root
