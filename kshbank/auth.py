"""Registration and login of users."""

from __future__ import annotations

from kshbank.storage import Storage
from kshbank.user import User

MIN_PASSWORD_LENGTH = 9


class RegistrationError(Exception):
    """A new user could not be registered."""


class Auth:
    """Registers users in a storage backend and checks their logins."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def register_user(
        self,
        first_name: str,
        last_name: str,
        username: str,
        email: str,
        password: str,
    ) -> User:
        """Create and store a new user, raising RegistrationError if refused."""
        if len(password) < MIN_PASSWORD_LENGTH:
            raise RegistrationError("Password too short.")
        if self.storage.is_username_taken(username):
            raise RegistrationError("Username already in use.")
        if self.storage.is_email_taken(email):
            raise RegistrationError("Email taken.")
        user = User(first_name, last_name, username, email, password)
        if not self.storage.save_user(user):
            raise RegistrationError("User could not be saved.")
        return user

    def login(self, username: str, password: str) -> bool:
        """Tell whether the username exists and the password matches."""
        user = self.storage.find_user_by_username(username)
        if user is None:
            return False
        return password == user.password