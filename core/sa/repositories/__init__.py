from .book import BookRepository
from .holding import HoldingRepository
from .ledger import LedgerRepository

__all__ = ['BookRepository', 'HoldingRepository', 'LedgerRepository']
