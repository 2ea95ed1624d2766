# core/sa/__init__.py
from .database import Database
from .models import (
    Base, Book, BookSales, BookLoan, BookPurchase,
    BookRefund, LedgerState, LedgerEntry
)

__all__ = [
    'Database',
    'Base',
    'Book',
    'BookSales',
    'BookLoan',
    'BookPurchase',
    'BookRefund',
    'LedgerState',
    'LedgerEntry'
]
