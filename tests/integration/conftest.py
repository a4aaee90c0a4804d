"""Integration test configuration.

Integration tests talk to the PostgreSQL instance at DATABASE__URL and are
skipped when nothing is listening there.
"""

import socket

import pytest
from sqlalchemy.engine import make_url

from blogcomments.config import Settings


def _database_reachable() -> bool:
    url = make_url(Settings().database_url)
    try:
        with socket.create_connection((url.host or "localhost", url.port or 5432), 1):
            return True
    except OSError:
        return False


def pytest_collection_modifyitems(config, items):
    if _database_reachable():
        return
    skip = pytest.mark.skip(reason="PostgreSQL not reachable at DATABASE__URL")
    for item in items:
        if "tests/integration" in str(item.fspath):
            item.add_marker(skip)
