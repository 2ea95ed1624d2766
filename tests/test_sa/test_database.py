# tests/test_sa/test_database.py
import pytest
from core.sa.database import Database
from core.sa.models import LedgerState

def test_sessions_are_not_shared(database):
    """Every caller gets its own session, there is no cached one"""
    first = database.get_session()
    second = database.get_session()
    try:
        assert first is not second
        assert not hasattr(database, "session")
    finally:
        first.close()
        second.close()

def test_get_db_commits(database):
    with database.get_db() as session:
        session.add(LedgerState(storekeeper="keeper", next_book_id=1))

    with database.get_db() as session:
        assert session.query(LedgerState).count() == 1

def test_get_db_rolls_back_on_error(database):
    with pytest.raises(RuntimeError):
        with database.get_db() as session:
            session.add(LedgerState(storekeeper="keeper", next_book_id=1))
            session.flush()
            raise RuntimeError("boom")

    with database.get_db() as session:
        assert session.query(LedgerState).count() == 0

def test_database_url_from_environment(monkeypatch, tmp_path):
    url = f"sqlite:///{tmp_path / 'env.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    assert Database().connection_string == url
