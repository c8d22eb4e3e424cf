import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Ensure `import ordercheck` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch) -> Iterator[None]:
    from ordercheck.config import get_settings
    from ordercheck.server.helpers.catalog import get_catalog

    monkeypatch.delenv("CATALOG_PATH", raising=False)
    get_settings.cache_clear()
    get_catalog.cache_clear()
    yield
    get_settings.cache_clear()
    get_catalog.cache_clear()
