import click
from typing import Optional
from core.exceptions import LedgerError
from core.models.book import MAX_INTEGER
from ..utils import db_option, caller_option, open_ledger, fail, print_book

@click.group()
def book():
    """Catalog, lending and purchase commands"""
    pass

@book.command()
@click.argument('title')
@click.argument('author')
@click.option('--price', type=click.IntRange(min=0, max=MAX_INTEGER), required=True, help='Unit price')
@click.option('--stock', type=click.IntRange(min=0, max=MAX_INTEGER), default=0, help='Informational stock level')
@caller_option
@db_option
def add(title: str, author: str, price: int, stock: int, caller: str, db_url: Optional[str]):
    """Add a book to the catalog (storekeeper only)

    Example:
        bookstore book add Dune Herbert --price 1000 --stock 5 --caller storekeeper
    """
    with open_ledger(db_url) as ledger:
        try:
            record = ledger.add_book(caller, title, author, price, stock)
        except LedgerError as e:
            fail(e)
        click.echo(click.style("Added book: ", fg='blue'), nl=False)
        print_book(record)

@book.command()
@click.argument('book_id', type=int)
@caller_option
@db_option
def remove(book_id: int, caller: str, db_url: Optional[str]):
    """Remove a book from the catalog (storekeeper only)"""
    with open_ledger(db_url) as ledger:
        try:
            ledger.remove_book(caller, book_id)
        except LedgerError as e:
            fail(e)
        click.echo(click.style(f"Removed book {book_id}", fg='blue'))

@book.command(name="list")
@click.option('--live-only/--all', default=False, help='Hide removed catalog slots')
@db_option
def list_books(live_only: bool, db_url: Optional[str]):
    """List every catalog slot in id order"""
    with open_ledger(db_url) as ledger:
        try:
            books = ledger.get_books()
        except LedgerError as e:
            fail(e)

        if not books:
            click.echo("Catalog is empty")
            return

        for book_id, record in enumerate(books, start=1):
            if record is not None:
                print_book(record)
            elif not live_only:
                click.echo(click.style(f"[{book_id}] (removed)", fg='yellow'))

@book.command()
@click.argument('book_id', type=int)
@db_option
def show(book_id: int, db_url: Optional[str]):
    """Show a single book"""
    with open_ledger(db_url) as ledger:
        try:
            record = ledger.get_book(book_id)
        except LedgerError as e:
            fail(e)
        print_book(record)

@book.command()
@click.argument('book_id', type=int)
@caller_option
@db_option
def borrow(book_id: int, caller: str, db_url: Optional[str]):
    """Borrow a book. Each caller may hold one loan at a time."""
    with open_ledger(db_url) as ledger:
        try:
            ledger.borrow_book(caller, book_id)
        except LedgerError as e:
            fail(e)
        click.echo(click.style(f"{caller} borrowed book {book_id}", fg='green'))

@book.command(name="return")
@click.argument('book_id', type=int)
@caller_option
@db_option
def return_book(book_id: int, caller: str, db_url: Optional[str]):
    """Return a borrowed book"""
    with open_ledger(db_url) as ledger:
        try:
            ledger.return_book(caller, book_id)
        except LedgerError as e:
            fail(e)
        click.echo(click.style(f"{caller} returned book {book_id}", fg='green'))

@book.command()
@click.argument('book_id', type=int)
@caller_option
@db_option
def buy(book_id: int, caller: str, db_url: Optional[str]):
    """Buy a book"""
    with open_ledger(db_url) as ledger:
        try:
            sold = ledger.buy_book(caller, book_id)
        except LedgerError as e:
            fail(e)
        click.echo(click.style(f"{caller} bought book {book_id} ", fg='green') +
                   click.style(f"({sold} sold)", fg='cyan'))

@book.command()
@click.argument('book_id', type=int)
@caller_option
@db_option
def refund(book_id: int, caller: str, db_url: Optional[str]):
    """Refund the caller's purchase of a book"""
    with open_ledger(db_url) as ledger:
        try:
            sold = ledger.refund_book(caller, book_id)
        except LedgerError as e:
            fail(e)
        click.echo(click.style(f"{caller} refunded book {book_id} ", fg='green') +
                   click.style(f"({sold} sold)", fg='cyan'))

@book.command()
@click.argument('book_id', type=int)
@db_option
def sales(book_id: int, db_url: Optional[str]):
    """Show net active purchases for a book"""
    with open_ledger(db_url) as ledger:
        try:
            count = ledger.get_sales(book_id)
        except LedgerError as e:
            fail(e)
        click.echo(f"Book {book_id}: {count} sold")

@book.command()
@click.argument('holder')
@db_option
def refunded(holder: str, db_url: Optional[str]):
    """Show the most recent refund for a holder"""
    with open_ledger(db_url) as ledger:
        try:
            record = ledger.get_refunded_books(holder)
        except LedgerError as e:
            fail(e)
        click.echo(click.style(f"Last refund for {holder}: ", fg='blue'), nl=False)
        print_book(record)

if __name__ == '__main__':
    book()
