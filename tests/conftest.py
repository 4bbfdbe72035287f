import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("ENABLE_FILE_LOGS", "0")

from config.catalog import reset_catalog
from config.registry import INVITE_KEY, bound_hook, unbind_hook
from config.settings import settings
from services.sessions import reset_store
from storage.migrate import migrate


@pytest.fixture(autouse=True)
def tmp_db(monkeypatch):
    td = tempfile.TemporaryDirectory()
    db_path = os.path.join(td.name, "test.db")
    monkeypatch.setattr(settings, "DB_PATH", db_path, raising=False)
    monkeypatch.setattr(settings, "SEED_DEMO_DATA", False, raising=False)
    monkeypatch.setattr(settings, "CATALOG_PATH", None, raising=False)
    migrate(db_path)
    reset_store()
    reset_catalog()
    unbind_hook(INVITE_KEY)
    try:
        yield db_path
    finally:
        reset_store()
        reset_catalog()
        unbind_hook(INVITE_KEY)
        td.cleanup()


@pytest.fixture
def invites():
    """Bind a recording invite sender and return the calls it receives."""

    calls = []
    with bound_hook(INVITE_KEY, lambda **kwargs: calls.append(kwargs)):
        yield calls
