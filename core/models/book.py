# core/models/book.py

from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from enum import Enum

# Widest value a signed 64-bit INTEGER column can hold
MAX_INTEGER = 2**63 - 1

class EventKind(str, Enum):
    BOOK_ADDED = "BookAdded"
    BOOK_REMOVED = "BookRemoved"
    BOOK_BORROWED = "BookBorrowed"
    BOOK_RETURNED = "BookReturned"
    BOOK_BOUGHT = "BookBought"
    BOOK_REFUNDED = "BookRefunded"

class BookRecord(BaseModel):
    """Immutable snapshot of a catalog entry"""
    id: int
    title: str
    author: str
    price: int
    stock: int

    model_config = ConfigDict(from_attributes=True, frozen=True)

class LedgerEvent(BaseModel):
    kind: EventKind
    book_id: int
    title: Optional[str] = None
    author: Optional[str] = None
    holder: Optional[str] = None
    quantity: Optional[int] = None
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def borrower(self) -> Optional[str]:
        if self.kind in (EventKind.BOOK_BORROWED, EventKind.BOOK_RETURNED):
            return self.holder
        return None

    @property
    def buyer(self) -> Optional[str]:
        if self.kind in (EventKind.BOOK_BOUGHT, EventKind.BOOK_REFUNDED):
            return self.holder
        return None
