# api/routes/holders.py

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_ledger, raise_http_error
from api.schemas.book import Book, HolderBook
from core.exceptions import LedgerError
from core.services.book_ledger import BookLedger

router = APIRouter(prefix="/holders", tags=["holders"])

@router.get("/{holder}/refund", response_model=HolderBook)
def get_refunded_book(holder: str, ledger: BookLedger = Depends(get_ledger)):
    """Get the most recent refund recorded for a holder"""
    try:
        book = ledger.get_refunded_books(holder)
    except LedgerError as e:
        raise_http_error(e)
    return HolderBook(holder=holder, book=Book.model_validate(book))

@router.get("/{holder}/loan", response_model=HolderBook)
def get_loan(holder: str, ledger: BookLedger = Depends(get_ledger)):
    try:
        book = ledger.get_loan(holder)
    except LedgerError as e:
        raise_http_error(e)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No book on loan")
    return HolderBook(holder=holder, book=Book.model_validate(book))

@router.get("/{holder}/purchase", response_model=HolderBook)
def get_purchase(holder: str, ledger: BookLedger = Depends(get_ledger)):
    try:
        book = ledger.get_purchase(holder)
    except LedgerError as e:
        raise_http_error(e)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active purchase")
    return HolderBook(holder=holder, book=Book.model_validate(book))
