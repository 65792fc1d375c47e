"""User registration and login over CSV storage, Ksh bank and saving accounts, and a console app."""

__version__ = "0.1.0"

__all__ = ["accounts", "auth", "cli", "storage", "user"]