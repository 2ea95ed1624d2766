# tests/test_sa/test_repositories/test_book_repository.py

import pytest
from datetime import datetime
from core.sa.repositories.book import BookRepository
from core.sa.models import Book

@pytest.fixture
def book_repo(db_session):
    """Fixture to create a BookRepository instance."""
    return BookRepository(db_session)

@pytest.fixture
def sample_book(book_repo, db_session):
    book = book_repo.create_book(1, "Dune", "Herbert", 1000, 5)
    db_session.commit()
    return book

@pytest.fixture
def multiple_books(book_repo, db_session):
    books = [
        book_repo.create_book(i, f"Book {i}", f"Author {i}", i * 100, i)
        for i in range(1, 6)
    ]
    db_session.commit()
    return books

def test_create_book(book_repo, db_session):
    """Test creating a catalog entry with an explicit id."""
    book = book_repo.create_book(7, "Emma", "Austen", 500, 2)
    db_session.commit()

    fetched = db_session.query(Book).filter_by(id=7).first()
    assert fetched is book
    assert fetched.title == "Emma"
    assert fetched.author == "Austen"
    assert fetched.price == 500
    assert fetched.stock == 2

def test_get_live(book_repo, sample_book):
    assert book_repo.get_live(sample_book.id) is sample_book

def test_get_live_nonexistent(book_repo):
    assert book_repo.get_live(999) is None

def test_mark_removed_hides_from_get_live(book_repo, sample_book, db_session):
    """Test a removed book keeps its slot but is no longer live."""
    book_repo.mark_removed(sample_book, datetime(2024, 1, 1))
    db_session.commit()

    assert book_repo.get_live(sample_book.id) is None
    removed = book_repo.get_by_id(sample_book.id)
    assert removed is not None
    assert removed.is_removed

def test_get_slots_ordered_and_bounded(book_repo, multiple_books):
    slots = book_repo.get_slots(4)
    assert [book.id for book in slots] == [1, 2, 3]

def test_get_slots_includes_removed(book_repo, multiple_books, db_session):
    book_repo.mark_removed(multiple_books[1], datetime(2024, 1, 1))
    db_session.commit()

    slots = book_repo.get_slots(6)
    assert len(slots) == 5
    assert slots[1].is_removed

def test_count_live(book_repo, multiple_books, db_session):
    book_repo.mark_removed(multiple_books[0], datetime(2024, 1, 1))
    db_session.commit()
    assert book_repo.count_live() == 4

def test_sales_count_defaults_to_zero(book_repo, sample_book):
    assert book_repo.get_sales_count(sample_book.id) == 0

def test_adjust_sales(book_repo, sample_book, db_session):
    assert book_repo.adjust_sales(sample_book.id, 1) == 1
    assert book_repo.adjust_sales(sample_book.id, 1) == 2
    assert book_repo.adjust_sales(sample_book.id, -1) == 1
    db_session.commit()
    assert book_repo.get_sales_count(sample_book.id) == 1

def test_adjust_sales_below_zero(book_repo, sample_book):
    """Test the sales counter refuses to go negative."""
    with pytest.raises(ValueError):
        book_repo.adjust_sales(sample_book.id, -1)
    assert book_repo.get_sales_count(sample_book.id) == 0
