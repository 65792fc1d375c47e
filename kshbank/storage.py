"""Persistent storage of users."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path

from kshbank.user import User

logger = logging.getLogger(__name__)

CSV_HEADER = "FirstName,LastName,Username,Email,Password"


class Storage(ABC):
    """Interface every user store provides."""

    @abstractmethod
    def save_user(self, user: User) -> bool:
        """Store a new user; return False if it clashes with an existing one."""

    @abstractmethod
    def is_username_taken(self, username: str) -> bool:
        """Tell whether a user with this username exists."""

    @abstractmethod
    def is_email_taken(self, email: str) -> bool:
        """Tell whether a user with this e-mail address exists."""

    @abstractmethod
    def find_user_by_username(self, username: str) -> User | None:
        """Return the user with this username, or None."""


def _parse_line(line: str) -> User:
    fields = line.split(",")[:5]
    fields += [""] * (5 - len(fields))
    return User(*fields)


class CSVStorage(Storage):
    """Users kept in a comma separated text file, one per line."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read_users(self) -> list[User]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        users = (_parse_line(line) for line in text.splitlines() if line)
        return [user for user in users if user.username]

    def load_users(self) -> list[User]:
        """Return every user in the file; a missing file holds none."""
        with self._lock:
            return self._read_users()

    def save_user(self, user: User) -> bool:
        with self._lock:
            for existing in self._read_users():
                if existing.username == user.username:
                    logger.warning("Username '%s' is already taken.", user.username)
                    return False
                if existing.email == user.email:
                    logger.warning("Email '%s' is already in use.", user.email)
                    return False
            is_new = not self.path.exists()
            with self.path.open("a", encoding="utf-8", newline="") as handle:
                if is_new:
                    handle.write(CSV_HEADER + "\n")
                handle.write(user.to_csv() + "\n")
            return True

    def is_username_taken(self, username: str) -> bool:
        return any(user.username == username for user in self.load_users())

    def is_email_taken(self, email: str) -> bool:
        return any(user.email == email for user in self.load_users())

    def find_user_by_username(self, username: str) -> User | None:
        return next(
            (user for user in self.load_users() if user.username == username), None
        )