# core/sa/repositories/book.py
from typing import Optional, List
from datetime import datetime
from sqlalchemy.orm import Session
from ..models import Book, BookSales

class BookRepository:
    """Repository for catalog slots and their sales counters.

    Changes are staged on the session; the caller owns the transaction.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """Get a catalog slot by id, including removed ones"""
        return self.session.query(Book).filter(Book.id == book_id).first()

    def get_live(self, book_id: int) -> Optional[Book]:
        """Get a book by id if it has not been removed.

        Args:
            book_id: The catalog id

        Returns:
            The Book object if present and live, None otherwise
        """
        return (
            self.session.query(Book)
            .filter(Book.id == book_id, Book.removed_at.is_(None))
            .first()
        )

    def get_slots(self, upper_id: int) -> List[Book]:
        """Get every catalog slot with an id below upper_id, ascending"""
        return (
            self.session.query(Book)
            .filter(Book.id >= 1, Book.id < upper_id)
            .order_by(Book.id)
            .all()
        )

    def count_live(self) -> int:
        return self.session.query(Book).filter(Book.removed_at.is_(None)).count()

    def create_book(self, book_id: int, title: str, author: str, price: int, stock: int) -> Book:
        """Stage a new catalog entry.

        Args:
            book_id: The id allocated from the ledger counter
            title: Book title
            author: Book author
            price: Unit price
            stock: Informational stock level

        Returns:
            The staged Book object
        """
        book = Book(
            id=book_id,
            title=title,
            author=author,
            price=price,
            stock=stock
        )
        self.session.add(book)
        self.session.flush()
        return book

    def mark_removed(self, book: Book, removed_at: datetime) -> Book:
        book.removed_at = removed_at
        self.session.flush()
        return book

    def get_sales_count(self, book_id: int) -> int:
        sales = self.session.query(BookSales).filter(BookSales.book_id == book_id).first()
        return sales.count if sales else 0

    def adjust_sales(self, book_id: int, delta: int) -> int:
        """Apply delta to a book's sales counter and return the new count.

        Raises:
            ValueError: If the counter would go negative
        """
        sales = self.session.query(BookSales).filter(BookSales.book_id == book_id).first()
        if sales is None:
            sales = BookSales(book_id=book_id, count=0)
            self.session.add(sales)

        new_count = sales.count + delta
        if new_count < 0:
            raise ValueError(f"Sales counter for book {book_id} cannot drop below zero")

        sales.count = new_count
        self.session.flush()
        return new_count
