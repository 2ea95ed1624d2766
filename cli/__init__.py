"""CLI package for Bookstore Ledger"""
from .main import cli
from .commands.book import book

__all__ = ['cli', 'book']
