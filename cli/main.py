# cli/main.py
import logging
import click
from .commands.book import book
from .commands.store import init, events

@click.group()
@click.option('--verbose/--no-verbose', default=False, help='Log ledger activity')
def cli(verbose: bool):
    """Bookstore Ledger CLI"""
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

cli.add_command(init)
cli.add_command(events)
cli.add_command(book)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
