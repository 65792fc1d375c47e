"""User records held by the storage backends."""

from __future__ import annotations

from dataclasses import dataclass

CSV_FIELDS = ("first_name", "last_name", "username", "email", "password")


@dataclass
class User:
    """A registered user of the bank."""

    first_name: str
    last_name: str
    username: str
    email: str
    password: str

    def to_csv(self) -> str:
        """Return the user as one comma separated line, without a line ending."""
        return ",".join(getattr(self, name) for name in CSV_FIELDS)