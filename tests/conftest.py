"""
Shared fixtures: a temporary SQLite database per test.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# make the guestbook package importable during local runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from guestbook.core import config as core_config  # noqa: E402
from guestbook.db import models  # noqa: E402
from guestbook.db import session as db_session  # noqa: E402


@pytest.fixture()
def clean_env(monkeypatch):
    """Run with no configuration at all: no .env file, no guestbook variables."""
    monkeypatch.setattr(core_config, "load_dotenv", lambda *a, **kw: False)
    for name in ("DATABASE_URL", "PORT", "HOST", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a fresh SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.dispose_engine()

    engine = db_session.get_engine()
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    db_session.dispose_engine()
    core_config.get_settings.cache_clear()
