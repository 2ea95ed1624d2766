# api/dependencies.py
from typing import NoReturn
from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from core.exceptions import (
    LedgerError, Unauthorized, NotFound, AlreadyHolding, NotHolding,
    NotPurchased, WrongBook, InvalidBook, NotInitialized, AlreadyInitialized,
    SalesUnderflow
)
from core.sa.database import get_db
from core.services.book_ledger import BookLedger

ERROR_STATUS = {
    Unauthorized: status.HTTP_403_FORBIDDEN,
    NotFound: status.HTTP_404_NOT_FOUND,
    AlreadyHolding: status.HTTP_409_CONFLICT,
    NotHolding: status.HTTP_409_CONFLICT,
    NotPurchased: status.HTTP_409_CONFLICT,
    WrongBook: status.HTTP_409_CONFLICT,
    InvalidBook: status.HTTP_400_BAD_REQUEST,
    NotInitialized: status.HTTP_409_CONFLICT,
    AlreadyInitialized: status.HTTP_409_CONFLICT,
    SalesUnderflow: status.HTTP_409_CONFLICT,
}

def get_ledger(db: Session = Depends(get_db)) -> BookLedger:
    """FastAPI dependency giving each request a ledger over its own session"""
    return BookLedger(db)

def raise_http_error(error: LedgerError) -> NoReturn:
    """Translate a ledger error into an HTTPException carrying the error type name"""
    status_code = ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST)
    raise HTTPException(
        status_code=status_code,
        detail={"error": type(error).__name__, "message": str(error)}
    )
