# api/schemas/ledger.py
from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, computed_field

from core.models.book import EventKind

class LedgerInit(BaseModel):
    storekeeper: str = Field(min_length=1, max_length=255)

class LedgerInfo(BaseModel):
    storekeeper: str

class Event(BaseModel):
    kind: EventKind
    book_id: int
    title: Optional[str] = None
    author: Optional[str] = None
    holder: Optional[str] = None
    quantity: Optional[int] = None
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def borrower(self) -> Optional[str]:
        if self.kind in (EventKind.BOOK_BORROWED, EventKind.BOOK_RETURNED):
            return self.holder
        return None

    @computed_field
    @property
    def buyer(self) -> Optional[str]:
        if self.kind in (EventKind.BOOK_BOUGHT, EventKind.BOOK_REFUNDED):
            return self.holder
        return None

class EventList(BaseModel):
    items: List[Event]
    total: int
