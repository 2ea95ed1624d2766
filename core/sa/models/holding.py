# core/sa/models/holding.py
from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin

class BookSnapshotMixin:
    """Copy of a catalog entry taken when the record was written"""
    book_id: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False)

class BookLoan(Base, BookSnapshotMixin, TimestampMixin):
    """Outstanding loan, one per holder"""
    __tablename__ = 'book_loan'

    holder: Mapped[str] = mapped_column(String(255), primary_key=True)

class BookPurchase(Base, BookSnapshotMixin, TimestampMixin):
    """Active purchase, one per holder. A new purchase overwrites the old one."""
    __tablename__ = 'book_purchase'

    holder: Mapped[str] = mapped_column(String(255), primary_key=True)

class BookRefund(Base, BookSnapshotMixin, TimestampMixin):
    """Most recent refunded purchase per holder"""
    __tablename__ = 'book_refund'

    holder: Mapped[str] = mapped_column(String(255), primary_key=True)
