# api/schemas/book.py
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from core.models.book import MAX_INTEGER

class BookBase(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    author: str = Field(min_length=1, max_length=255)
    price: int = Field(ge=0, le=MAX_INTEGER)
    stock: int = Field(ge=0, le=MAX_INTEGER)

class BookCreate(BookBase):
    pass

class Book(BookBase):
    id: int

    model_config = ConfigDict(from_attributes=True)

class BookList(BaseModel):
    """Every catalog slot in id order; removed slots are null"""
    items: List[Optional[Book]]
    total: int
    live: int

class SalesCount(BaseModel):
    book_id: int
    count: int

class HolderBook(BaseModel):
    holder: str
    book: Book
