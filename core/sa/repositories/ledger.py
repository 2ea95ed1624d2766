# core/sa/repositories/ledger.py
from typing import Optional, List
from sqlalchemy.orm import Session
from ..models import LedgerState, LedgerEntry

LEDGER_STATE_ID = 1

class LedgerRepository:
    """Repository for the ledger state row and the event log."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get_state(self) -> Optional[LedgerState]:
        """Get the ledger state row.

        Returns:
            The LedgerState object if the ledger was initialized, None otherwise
        """
        return self.session.query(LedgerState).filter(LedgerState.id == LEDGER_STATE_ID).first()

    def create_state(self, storekeeper: str) -> LedgerState:
        """Stage the ledger state row with the id counter at 1.

        Args:
            storekeeper: Identity allowed to manage the catalog

        Returns:
            The staged LedgerState object
        """
        state = LedgerState(id=LEDGER_STATE_ID, storekeeper=storekeeper, next_book_id=1)
        self.session.add(state)
        self.session.flush()
        return state

    def allocate_book_id(self, state: LedgerState) -> int:
        """Return the next catalog id and advance the counter"""
        book_id = state.next_book_id
        state.next_book_id = book_id + 1
        self.session.flush()
        return book_id

    def add_entry(self, entry: LedgerEntry) -> LedgerEntry:
        self.session.add(entry)
        self.session.flush()
        return entry

    def get_entries(self, kind: Optional[str] = None, limit: Optional[int] = None) -> List[LedgerEntry]:
        """Get logged events, oldest first.

        Args:
            kind: Optional event kind to filter on
            limit: Maximum number of entries to return

        Returns:
            List of LedgerEntry objects
        """
        query = self.session.query(LedgerEntry)
        if kind:
            query = query.filter(LedgerEntry.kind == kind)
        query = query.order_by(LedgerEntry.id)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_entries(self) -> int:
        return self.session.query(LedgerEntry).count()
