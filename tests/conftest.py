"""Configure pytest environment for all tests."""

import logging
import os
import sys
from pathlib import Path

import pytest

logger = logging.getLogger(__name__)

# Get absolute paths
PROJECT_ROOT = Path(__file__).parent.parent.absolute()
SRC_PATH = PROJECT_ROOT / "src"

# Let the tests run from a plain checkout as well as an editable install
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def user_data():
    """A decoded JSON payload whose scalars all arrived as strings."""
    return {
        "id": "101",
        "active": "true",
        "balance": "250.75",
        "tags": ["vip", "loyal"],
        "purchases": [
            {"item": "Book", "price": "12.99"},
            {"item": "Pen", "price": "2.50"},
        ],
    }


@pytest.fixture
def nested_data():
    return {"user": {"id": "123", "roles": ["admin", "editor"]}}


@pytest.fixture
def clean_env(monkeypatch):
    """Remove OBJECT_FINDER_* variables so settings tests start from defaults."""
    for key in list(os.environ):
        if key.startswith("OBJECT_FINDER_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


def pytest_make_parametrize_id(config, val, argname):
    """Give oversized ints a short test id; str() on them exceeds the digit limit."""
    if isinstance(val, int) and not isinstance(val, bool) and val.bit_length() > 10000:
        return f"int{'-' if val < 0 else ''}{val.bit_length()}bits"
    return None
