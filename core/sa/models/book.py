# core/sa/models/book.py
from datetime import datetime
from sqlalchemy import String, Integer, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin, UTCDateTime

class Book(Base, TimestampMixin):
    """Catalog slot. Removed books keep their row so ids are never reused."""
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False)
    removed_at: Mapped[datetime | None] = mapped_column(UTCDateTime, nullable=True)

    # Relationships
    sales = relationship('BookSales', back_populates='book', uselist=False)

    __table_args__ = (
        CheckConstraint('price >= 0', name='ck_book_price_unsigned'),
        CheckConstraint('stock >= 0', name='ck_book_stock_unsigned'),
        Index('idx_book_title', 'title'),
    )

    @property
    def is_removed(self) -> bool:
        return self.removed_at is not None

class BookSales(Base, TimestampMixin):
    """Net active purchases per book"""
    __tablename__ = 'book_sales'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    book = relationship('Book', back_populates='sales')

    __table_args__ = (
        CheckConstraint('count >= 0', name='ck_book_sales_unsigned'),
    )
