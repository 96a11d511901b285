import os

os.environ.setdefault("STARCOUNTER_ENV", "testing")

import pytest

from starcounter import MemoryRepo, reset_config


@pytest.fixture(autouse=True)
def clean_state():
    """Every test starts with an empty memory store and a fresh configuration."""
    reset_config()
    MemoryRepo().clear()
    yield
    MemoryRepo().clear()
    reset_config()
