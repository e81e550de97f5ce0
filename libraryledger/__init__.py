"""A ledger of library books, issues and logins kept in fixed-size binary record files."""

__version__ = "1.0.0"
__all__ = ["records", "books", "login", "cli"]