import click
from typing import Optional
from core.exceptions import LedgerError
from core.models.book import EventKind
from ..utils import db_option, open_ledger, fail

@click.command()
@click.argument('storekeeper')
@db_option
def init(storekeeper: str, db_url: Optional[str]):
    """Set up the ledger with STOREKEEPER as the only catalog manager.

    This can only be run once per database.
    """
    with open_ledger(db_url) as ledger:
        try:
            ledger.initialize(storekeeper)
        except LedgerError as e:
            fail(e)
        click.echo(click.style("Ledger initialized. Storekeeper: ", fg='blue') +
                   click.style(storekeeper, fg='cyan'))

@click.command()
@click.option('--kind', type=click.Choice([k.value for k in EventKind]), default=None, help='Only show events of this kind')
@click.option('--limit', default=None, type=int, help='Limit number of events')
@db_option
def events(kind: Optional[str], limit: Optional[int], db_url: Optional[str]):
    """Show the event log, oldest first"""
    with open_ledger(db_url) as ledger:
        entries = ledger.get_events(kind=EventKind(kind) if kind else None, limit=limit)

        if not entries:
            click.echo("No events recorded")
            return

        for event in entries:
            details = [f"book={event.book_id}"]
            if event.title is not None:
                details.append(f"title={event.title}")
            if event.author is not None:
                details.append(f"author={event.author}")
            if event.holder is not None:
                details.append(f"holder={event.holder}")
            if event.quantity is not None:
                details.append(f"quantity={event.quantity}")
            click.echo(click.style(f"{event.timestamp.isoformat()} ", fg='blue') +
                       click.style(event.kind.value, fg='cyan') + " " + " ".join(details))

if __name__ == '__main__':
    events()
