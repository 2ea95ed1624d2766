# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from core.sa.models import Base
from core.sa.database import Database
from core.services.book_ledger import BookLedger
from tests.helpers import STOREKEEPER, FIXED_TIME

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_bookstore.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.engine.dispose()

@pytest.fixture(autouse=True)
def cleanup_db(database):
    """Clean up database tables before each test"""
    with database.get_db() as session:
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
    yield

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database._SessionFactory()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def events():
    """Collects events delivered to ledger listeners"""
    return []

@pytest.fixture
def ledger(db_session, events):
    """An uninitialized ledger with a fixed clock and a recording listener"""
    return BookLedger(db_session, clock=lambda: FIXED_TIME, listeners=[events.append])

@pytest.fixture
def store(ledger):
    """A ledger initialized with the test storekeeper"""
    ledger.initialize(STOREKEEPER)
    return ledger

@pytest.fixture
def dune(store):
    """Dune added as book 1"""
    return store.add_book(STOREKEEPER, "Dune", "Herbert", 1000, 5)
