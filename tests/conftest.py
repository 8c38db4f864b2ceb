# tests/conftest.py
"""Pytest configuration and fixtures"""
import logging
import sys
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() replaces root handlers; put them back after each test"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def translations():
    """Translation table with a namespaced subtree and plain keys"""
    return {
        "$_layout": {
            "header": {
                "hello_user": "Hello {{name}}, {{other}}!",
                "title": "Welcome",
            },
            "footer": "Bye",
        },
        "layout": {
            "header": {
                "hello_user": "Hello {{name}}, {{other}}!",
            },
        },
        "no_colon_here": "plain value",
        "counts": {"items": 3, "ratio": 0.5, "enabled": True, "disabled": False},
        "nothing": None,
        "list": ["a", "b"],
        "": {"": "empty keys"},
    }


@pytest.fixture
def scripts_dir():
    return project_root / "scripts"
