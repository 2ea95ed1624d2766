# core/sa/models/ledger.py
from datetime import datetime
from sqlalchemy import String, Integer, Index
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin, UTCDateTime

class LedgerState(Base, TimestampMixin):
    """Single row holding the storekeeper and the id counter"""
    __tablename__ = 'ledger_state'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    storekeeper: Mapped[str] = mapped_column(String(255), nullable=False)
    next_book_id: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

class LedgerEntry(Base):
    """Persisted notification for a committed mutation"""
    __tablename__ = 'ledger_event'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[str] = mapped_column(String(50), nullable=False)
    book_id: Mapped[int] = mapped_column(Integer, nullable=False)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    holder: Mapped[str | None] = mapped_column(String(255), nullable=True)
    quantity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    timestamp: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    __table_args__ = (
        Index('idx_ledger_event_kind', 'kind'),
        Index('idx_ledger_event_holder', 'holder'),
    )
