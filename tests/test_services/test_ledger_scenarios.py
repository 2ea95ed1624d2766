# tests/test_services/test_ledger_scenarios.py
import pytest
from core.exceptions import AlreadyHolding, Unauthorized
from core.models.book import BookRecord, EventKind
from core.services.book_ledger import BookLedger
from tests.helpers import STOREKEEPER

def test_lending_and_purchase_walkthrough(store, events):
    """Storekeeper adds Dune, A borrows and returns it, B buys and refunds it."""
    store.add_book(STOREKEEPER, "Dune", "Herbert", 1000, 5)
    assert store.get_book(1) == BookRecord(id=1, title="Dune", author="Herbert", price=1000, stock=5)

    store.borrow_book("A", 1)
    assert events[-1].kind == EventKind.BOOK_BORROWED
    assert events[-1].holder == "A"

    with pytest.raises(AlreadyHolding):
        store.borrow_book("A", 1)

    store.return_book("A", 1)
    assert events[-1].kind == EventKind.BOOK_RETURNED

    store.buy_book("B", 1)
    assert store.get_sales(1) == 1

    store.refund_book("B", 1)
    assert store.get_sales(1) == 0
    assert store.get_refunded_books("B").id == 1

def test_unauthorized_add_walkthrough(store, events):
    with pytest.raises(Unauthorized):
        store.add_book("not-the-storekeeper", "Dune", "Herbert", 1000, 5)
    assert len(store.get_books()) == 0
    assert events == []

def test_ledger_persists_across_sessions(database):
    """Test a fresh session sees what an earlier session committed."""
    with database.get_db() as session:
        ledger = BookLedger(session)
        ledger.initialize(STOREKEEPER)
        ledger.add_book(STOREKEEPER, "Dune", "Herbert", 1000, 5)
        ledger.borrow_book("A", 1)

    with database.get_db() as session:
        ledger = BookLedger(session)
        assert ledger.get_loan("A").title == "Dune"
        with pytest.raises(AlreadyHolding):
            ledger.borrow_book("A", 1)
