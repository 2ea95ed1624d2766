# api/routes/books.py

from fastapi import APIRouter, Depends, Header, status

from api.dependencies import get_ledger, raise_http_error
from api.schemas.book import Book, BookCreate, BookList, SalesCount
from core.exceptions import LedgerError
from core.services.book_ledger import BookLedger

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=BookList)
def get_books(ledger: BookLedger = Depends(get_ledger)):
    """
    Get every catalog slot in id order.

    Removed books keep their slot and come back as null, so clients that
    only want live books must filter.
    """
    try:
        books = ledger.get_books()
    except LedgerError as e:
        raise_http_error(e)

    return BookList(
        items=[Book.model_validate(book) if book else None for book in books],
        total=len(books),
        live=sum(1 for book in books if book is not None)
    )

@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def add_book(
    book: BookCreate,
    caller: str = Header(alias="X-Caller"),
    ledger: BookLedger = Depends(get_ledger)
):
    """Add a book to the catalog. Only the storekeeper may do this."""
    try:
        record = ledger.add_book(caller, book.title, book.author, book.price, book.stock)
    except LedgerError as e:
        raise_http_error(e)
    return Book.model_validate(record)

@router.get("/{book_id}", response_model=Book)
def get_book(book_id: int, ledger: BookLedger = Depends(get_ledger)):
    try:
        return Book.model_validate(ledger.get_book(book_id))
    except LedgerError as e:
        raise_http_error(e)

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_book(
    book_id: int,
    caller: str = Header(alias="X-Caller"),
    ledger: BookLedger = Depends(get_ledger)
):
    try:
        ledger.remove_book(caller, book_id)
    except LedgerError as e:
        raise_http_error(e)

@router.post("/{book_id}/borrow", status_code=status.HTTP_204_NO_CONTENT)
def borrow_book(
    book_id: int,
    caller: str = Header(alias="X-Caller"),
    ledger: BookLedger = Depends(get_ledger)
):
    try:
        ledger.borrow_book(caller, book_id)
    except LedgerError as e:
        raise_http_error(e)

@router.post("/{book_id}/return", status_code=status.HTTP_204_NO_CONTENT)
def return_book(
    book_id: int,
    caller: str = Header(alias="X-Caller"),
    ledger: BookLedger = Depends(get_ledger)
):
    try:
        ledger.return_book(caller, book_id)
    except LedgerError as e:
        raise_http_error(e)

@router.post("/{book_id}/buy", response_model=SalesCount)
def buy_book(
    book_id: int,
    caller: str = Header(alias="X-Caller"),
    ledger: BookLedger = Depends(get_ledger)
):
    try:
        count = ledger.buy_book(caller, book_id)
    except LedgerError as e:
        raise_http_error(e)
    return SalesCount(book_id=book_id, count=count)

@router.post("/{book_id}/refund", response_model=SalesCount)
def refund_book(
    book_id: int,
    caller: str = Header(alias="X-Caller"),
    ledger: BookLedger = Depends(get_ledger)
):
    try:
        count = ledger.refund_book(caller, book_id)
    except LedgerError as e:
        raise_http_error(e)
    return SalesCount(book_id=book_id, count=count)

@router.get("/{book_id}/sales", response_model=SalesCount)
def get_sales(book_id: int, ledger: BookLedger = Depends(get_ledger)):
    try:
        count = ledger.get_sales(book_id)
    except LedgerError as e:
        raise_http_error(e)
    return SalesCount(book_id=book_id, count=count)
