# core/sa/models/__init__.py
from .base import Base, TimestampMixin, UTCDateTime
from .book import Book, BookSales
from .holding import BookSnapshotMixin, BookLoan, BookPurchase, BookRefund
from .ledger import LedgerState, LedgerEntry

__all__ = [
    'Base',
    'TimestampMixin',
    'UTCDateTime',
    'Book',
    'BookSales',
    'BookSnapshotMixin',
    'BookLoan',
    'BookPurchase',
    'BookRefund',
    'LedgerState',
    'LedgerEntry'
]
