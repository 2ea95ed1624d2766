# core/services/book_ledger.py

import logging
from contextlib import contextmanager
from datetime import datetime, UTC
from typing import Callable, Iterator, List, Optional

from sqlalchemy.orm import Session

from core.exceptions import (
    LedgerError, Unauthorized, NotFound, AlreadyHolding, NotHolding,
    NotPurchased, WrongBook, InvalidBook, NotInitialized, AlreadyInitialized,
    SalesUnderflow
)
from core.models.book import BookRecord, EventKind, LedgerEvent, MAX_INTEGER
from core.sa.models import Book, BookSnapshotMixin, LedgerState, LedgerEntry
from core.sa.repositories import BookRepository, HoldingRepository, LedgerRepository
from core.services.authorization import CatalogPolicy, StorekeeperPolicy

logger = logging.getLogger(__name__)

Listener = Callable[[LedgerEvent], None]

def utc_now() -> datetime:
    return datetime.now(UTC)

def as_utc(moment: datetime) -> datetime:
    """Normalise a clock reading to aware UTC. Naive readings are taken to be UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)

def book_record(book: Optional[Book]) -> Optional[BookRecord]:
    """Convert a catalog slot to a record, None when absent or removed"""
    if book is None or book.is_removed:
        return None
    return BookRecord.model_validate(book)

def snapshot_record(snapshot: Optional[BookSnapshotMixin]) -> Optional[BookRecord]:
    """Convert a holder's snapshot row to a record"""
    if snapshot is None:
        return None
    return BookRecord(
        id=snapshot.book_id,
        title=snapshot.title,
        author=snapshot.author,
        price=snapshot.price,
        stock=snapshot.stock
    )

class BookLedger:
    """Catalog, lending and purchase ledger for a single bookstore.

    Every mutating operation runs in one transaction on the given session:
    guards first, then writes, then exactly one event. A failed guard rolls
    back the whole operation and raises a LedgerError subclass. Listeners
    are notified only after the transaction commits.
    """

    def __init__(
        self,
        session: Session,
        clock: Optional[Callable[[], datetime]] = None,
        policy: Optional[CatalogPolicy] = None,
        listeners: Optional[List[Listener]] = None
    ):
        """
        Initialize the ledger.

        Args:
            session: SQLAlchemy session
            clock: Callable returning the current time for event timestamps
            policy: Authorization policy for catalog management
            listeners: Callables notified with each committed event
        """
        self.session = session
        self.clock = clock or utc_now
        self.policy = policy or StorekeeperPolicy()
        self.listeners: List[Listener] = list(listeners or [])
        self.books = BookRepository(session)
        self.holdings = HoldingRepository(session)
        self.ledger = LedgerRepository(session)
        self._pending: List[LedgerEvent] = []

    def subscribe(self, listener: Listener) -> None:
        self.listeners.append(listener)

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[None]:
        self._pending = []
        try:
            yield
            self.session.commit()
        except LedgerError as e:
            self.session.rollback()
            self._pending = []
            logger.warning(f"{operation} rejected: {e}")
            raise
        except Exception:
            self.session.rollback()
            self._pending = []
            raise

        events, self._pending = self._pending, []
        for event in events:
            self._notify(event)

    def _notify(self, event: LedgerEvent) -> None:
        for listener in self.listeners:
            try:
                listener(event)
            except Exception:
                # Operation is already committed at this point
                logger.exception(f"Listener failed for {event.kind.value} on book {event.book_id}")

    def _emit(self, kind: EventKind, book_id: int, **fields) -> None:
        event = LedgerEvent(kind=kind, book_id=book_id, timestamp=as_utc(self.clock()), **fields)
        self.ledger.add_entry(LedgerEntry(
            kind=event.kind.value,
            book_id=event.book_id,
            title=event.title,
            author=event.author,
            holder=event.holder,
            quantity=event.quantity,
            timestamp=event.timestamp
        ))
        self._pending.append(event)

    def _require_state(self) -> LedgerState:
        state = self.ledger.get_state()
        if state is None:
            raise NotInitialized("Ledger has not been initialized")
        return state

    def _require_book(self, book_id: int) -> Book:
        book = self.books.get_live(book_id)
        if book is None:
            raise NotFound(f"Book {book_id} not found")
        return book

    # Setup

    def initialize(self, storekeeper: str) -> None:
        """Fix the storekeeper identity and start the id counter at 1.

        Raises:
            AlreadyInitialized: If the ledger was set up before
        """
        with self._transaction("initialize"):
            if self.ledger.get_state() is not None:
                raise AlreadyInitialized("Ledger is already initialized")
            if not storekeeper:
                raise LedgerError("Storekeeper identity must not be empty")
            self.ledger.create_state(storekeeper)
        logger.info(f"Ledger initialized with storekeeper {storekeeper}")

    # Catalog

    def add_book(self, caller: str, title: str, author: str, price: int, stock: int) -> BookRecord:
        """
        Add a book to the catalog under the next sequential id.

        Args:
            caller: Identity performing the operation
            title: Book title
            author: Book author
            price: Unit price, 0 to MAX_INTEGER
            stock: Informational stock level, 0 to MAX_INTEGER

        Returns:
            The stored BookRecord

        Raises:
            Unauthorized: If the caller may not manage the catalog
            InvalidBook: If any field is out of range
        """
        with self._transaction("add_book"):
            state = self._require_state()
            if not self.policy.can_manage_catalog(caller, state):
                raise Unauthorized(f"{caller} may not add books")
            if not title or not author:
                raise InvalidBook("Title and author are required")
            if price < 0 or stock < 0:
                raise InvalidBook("Price and stock must not be negative")
            if price > MAX_INTEGER or stock > MAX_INTEGER:
                raise InvalidBook(f"Price and stock must not exceed {MAX_INTEGER}")

            book_id = self.ledger.allocate_book_id(state)
            book = self.books.create_book(book_id, title, author, price, stock)
            record = book_record(book)
            self._emit(EventKind.BOOK_ADDED, book_id, title=title, author=author)
        logger.info(f"Added book {book_id}: {title} by {author}")
        return record

    def remove_book(self, caller: str, book_id: int) -> None:
        """Soft-delete a catalog entry. Its id is never handed out again."""
        with self._transaction("remove_book"):
            state = self._require_state()
            if not self.policy.can_manage_catalog(caller, state):
                raise Unauthorized(f"{caller} may not remove books")
            book = self._require_book(book_id)
            self.books.mark_removed(book, self.clock())
            self._emit(EventKind.BOOK_REMOVED, book_id)
        logger.info(f"Removed book {book_id}")

    # Lending

    def borrow_book(self, caller: str, book_id: int) -> None:
        """Record a loan of the current catalog entry. Stock is not touched."""
        with self._transaction("borrow_book"):
            self._require_state()
            if self.holdings.get_loan(caller) is not None:
                raise AlreadyHolding(f"{caller} already has a book on loan")
            book = self._require_book(book_id)
            self.holdings.set_loan(caller, book)
            self._emit(EventKind.BOOK_BORROWED, book_id, holder=caller)
        logger.info(f"Book {book_id} borrowed by {caller}")

    def return_book(self, caller: str, book_id: int) -> None:
        """Clear the caller's loan if it matches the live catalog entry"""
        with self._transaction("return_book"):
            self._require_state()
            live = book_record(self.books.get_by_id(book_id))
            held = snapshot_record(self.holdings.get_loan(caller))
            if held != live:
                raise WrongBook(f"{caller} does not hold book {book_id}")
            if held is None:
                raise NotHolding(f"{caller} has no book on loan")
            self.holdings.clear_loan(caller)
            self._emit(EventKind.BOOK_RETURNED, book_id, holder=caller)
        logger.info(f"Book {book_id} returned by {caller}")

    # Purchases

    def buy_book(self, caller: str, book_id: int) -> int:
        """
        Buy a book, replacing any purchase the caller already has.

        Returns:
            The book's sales count after the purchase
        """
        with self._transaction("buy_book"):
            self._require_state()
            book = self._require_book(book_id)
            self.holdings.set_purchase(caller, book)
            sold = self.books.adjust_sales(book_id, 1)
            self._emit(EventKind.BOOK_BOUGHT, book_id, holder=caller, quantity=1)
        logger.info(f"Book {book_id} bought by {caller}, {sold} sold")
        return sold

    def refund_book(self, caller: str, book_id: int) -> int:
        """
        Refund the caller's purchase if it matches the live catalog entry.

        Returns:
            The book's sales count after the refund

        Raises:
            WrongBook: If the purchase and the catalog entry differ
            NotPurchased: If the caller has no purchase
            SalesUnderflow: If the book has no sales left to refund
        """
        with self._transaction("refund_book"):
            self._require_state()
            live = book_record(self.books.get_by_id(book_id))
            purchased = snapshot_record(self.holdings.get_purchase(caller))
            if purchased != live:
                raise WrongBook(f"{caller} did not buy book {book_id}")
            if purchased is None:
                raise NotPurchased(f"{caller} has no purchase to refund")

            book = self.books.get_by_id(book_id)
            self.holdings.clear_purchase(caller)
            self.holdings.set_refund(caller, book)
            try:
                sold = self.books.adjust_sales(book_id, -1)
            except ValueError as e:
                raise SalesUnderflow(str(e)) from e
            self._emit(EventKind.BOOK_REFUNDED, book_id, holder=caller, quantity=1)
        logger.info(f"Book {book_id} refunded to {caller}, {sold} sold")
        return sold

    # Queries

    def get_books(self) -> List[Optional[BookRecord]]:
        """Every allocated slot in id order. Removed slots come back as None."""
        state = self._require_state()
        slots = {book.id: book for book in self.books.get_slots(state.next_book_id)}
        return [book_record(slots.get(book_id)) for book_id in range(1, state.next_book_id)]

    def get_book(self, book_id: int) -> BookRecord:
        self._require_state()
        return book_record(self._require_book(book_id))

    def get_refunded_books(self, holder: str) -> BookRecord:
        """Most recent refund for the holder"""
        self._require_state()
        refund = self.holdings.get_refund(holder)
        if refund is None:
            raise NotFound(f"No refund recorded for {holder}")
        return snapshot_record(refund)

    def get_sales(self, book_id: int) -> int:
        self._require_state()
        return self.books.get_sales_count(book_id)

    def get_loan(self, holder: str) -> Optional[BookRecord]:
        self._require_state()
        return snapshot_record(self.holdings.get_loan(holder))

    def get_purchase(self, holder: str) -> Optional[BookRecord]:
        self._require_state()
        return snapshot_record(self.holdings.get_purchase(holder))

    def get_storekeeper(self) -> str:
        return self._require_state().storekeeper

    def get_events(self, kind: Optional[EventKind] = None, limit: Optional[int] = None) -> List[LedgerEvent]:
        """Persisted event log, oldest first"""
        entries = self.ledger.get_entries(kind=kind.value if kind else None, limit=limit)
        return [LedgerEvent.model_validate(entry) for entry in entries]
