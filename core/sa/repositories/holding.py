# core/sa/repositories/holding.py
from typing import Optional, Type, TypeVar
from sqlalchemy.orm import Session
from ..models import Book, BookLoan, BookPurchase, BookRefund

Record = TypeVar('Record', BookLoan, BookPurchase, BookRefund)

class HoldingRepository:
    """Repository for per-holder loan, purchase and refund slots.

    Each table holds at most one row per holder. Writing a slot replaces
    whatever the holder had there before.
    """

    def __init__(self, session: Session):
        self.session = session

    def _get(self, model: Type[Record], holder: str) -> Optional[Record]:
        return self.session.query(model).filter(model.holder == holder).first()

    def _put(self, model: Type[Record], holder: str, book: Book) -> Record:
        record = self._get(model, holder)
        if record is None:
            record = model(holder=holder)
            self.session.add(record)

        record.book_id = book.id
        record.title = book.title
        record.author = book.author
        record.price = book.price
        record.stock = book.stock
        self.session.flush()
        return record

    def _clear(self, model: Type[Record], holder: str) -> bool:
        deleted = (
            self.session.query(model)
            .filter(model.holder == holder)
            .delete()
        )
        self.session.flush()
        return deleted > 0

    def get_loan(self, holder: str) -> Optional[BookLoan]:
        return self._get(BookLoan, holder)

    def set_loan(self, holder: str, book: Book) -> BookLoan:
        return self._put(BookLoan, holder, book)

    def clear_loan(self, holder: str) -> bool:
        return self._clear(BookLoan, holder)

    def get_purchase(self, holder: str) -> Optional[BookPurchase]:
        return self._get(BookPurchase, holder)

    def set_purchase(self, holder: str, book: Book) -> BookPurchase:
        return self._put(BookPurchase, holder, book)

    def clear_purchase(self, holder: str) -> bool:
        return self._clear(BookPurchase, holder)

    def get_refund(self, holder: str) -> Optional[BookRefund]:
        return self._get(BookRefund, holder)

    def set_refund(self, holder: str, book: Book) -> BookRefund:
        return self._put(BookRefund, holder, book)
