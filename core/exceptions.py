# core/exceptions.py

class LedgerError(Exception):
    """Base exception for bookstore ledger errors."""


class Unauthorized(LedgerError):
    """Caller is not allowed to manage the catalog."""


class NotFound(LedgerError):
    """Referenced book or record does not exist."""


class AlreadyHolding(LedgerError):
    """Caller already has a book on loan."""


class NotHolding(LedgerError):
    """Caller has no book on loan."""


class NotPurchased(LedgerError):
    """Caller has no active purchase."""


class WrongBook(LedgerError):
    """Caller's recorded book does not match the live catalog entry."""


class InvalidBook(LedgerError):
    """Book fields failed validation."""


class NotInitialized(LedgerError):
    """Ledger has not been set up with a storekeeper yet."""


class AlreadyInitialized(LedgerError):
    """Ledger setup may only run once."""


class SalesUnderflow(LedgerError):
    """Refund would take a sales counter below zero."""
