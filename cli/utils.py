import click
from contextlib import contextmanager
from typing import Iterator, NoReturn, Optional
from core.exceptions import LedgerError
from core.models.book import BookRecord
from core.sa.database import Database
from core.services.book_ledger import BookLedger

db_option = click.option(
    '--db', 'db_url', default=None, envvar='DATABASE_URL',
    help='Database URL (defaults to DATABASE_URL or sqlite:///bookstore.db)'
)

caller_option = click.option(
    '--caller', required=True, help='Identity performing the operation'
)

@contextmanager
def open_ledger(db_url: Optional[str]) -> Iterator[BookLedger]:
    """Open a ledger on its own session, creating tables when missing"""
    db = Database(db_url)
    db.init_db()
    session = db.get_session()
    try:
        yield BookLedger(session)
    finally:
        session.close()

def fail(error: LedgerError) -> NoReturn:
    """Report a rejected operation and exit non-zero"""
    click.echo(click.style(f"{type(error).__name__}: ", fg='red') +
               click.style(str(error), fg='red'), err=True)
    raise click.exceptions.Exit(1)

def format_book(book: BookRecord) -> str:
    return (click.style(f"[{book.id}] ", fg='cyan') +
            click.style(book.title, fg='green') +
            f" by {book.author}" +
            click.style(f" (price: {book.price}, stock: {book.stock})", fg='blue'))

def print_book(book: BookRecord) -> None:
    click.echo(format_book(book))
