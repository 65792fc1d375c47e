"""Interactive command line front end of the banking app."""

from __future__ import annotations

import argparse
import sys

from kshbank.auth import Auth, RegistrationError
from kshbank.storage import CSVStorage, Storage
from kshbank.user import User

DEFAULT_USERS_FILE = "users.csv"

BANNER = (
    "\n============================================================\n"
    "           🌟 Welcome to the Banking App 🌟\n"
    "============================================================\n\n"
)

MENU = (
    "Choices.\n"
    "1). Login\n"
    "2). Register new user.\n"
    "3). Explore the features of the app\n"
)

MORE_OPTIONS = "more options here"


def _read_word(prompt: str) -> str:
    """Prompt for input and return its first whitespace separated word.

    Blank lines are skipped, as a stream extraction would skip them.
    """
    line = input(prompt)
    while not line.split():
        line = input()
    return line.split()[0]


def _ask_field(field: str) -> str:
    """Prompt for one registration field and return the word given."""
    return _read_word(f"Enter your {field}: ")


def welcome(storage: Storage) -> int | None:
    """Greet the user and run the main menu."""
    print(BANNER, end="")
    print("How can we assist you today?")
    print("Please choose an option below:")
    return get_choice(storage)


def get_choice(storage: Storage) -> int | None:
    """Ask for a menu choice until a valid one is given and act on it.

    Returns the accepted choice, or None when input runs out.
    """
    while True:
        print(MENU, end="")
        try:
            answer = _read_word("Your choice: ")
        except EOFError:
            print()
            return None
        try:
            choice = int(answer)
        except ValueError:
            print("Invalid input. Please enter a number:")
            continue

        if choice == 1:
            print("Logging in now.")
            return choice
        if choice == 2:
            print("Register new user.")
            register_user(storage)
            return choice
        if choice == 3:
            print("We are going for app tour.")
            return choice
        if choice == 4:
            print("Exiting the app. Goodbye!")
            return choice
        print("Invalid option. Please try again:")


def select_options() -> str:
    """Write the further options of the app to standard output and return them."""
    sys.stdout.write(MORE_OPTIONS)
    sys.stdout.flush()
    return MORE_OPTIONS


def register_user(storage: Storage) -> User | None:
    """Ask for the new user's details and register them.

    Returns the stored user, or None if registration was refused.
    """
    try:
        first_name = _ask_field("first name")
        last_name = _ask_field("last name")
        username = _ask_field("username")
        email = _ask_field("email")
        password = _ask_field("password")
    except EOFError:
        print("Error: input ended before registration was complete.", file=sys.stderr)
        return None

    auth = Auth(storage)
    try:
        user = auth.register_user(first_name, last_name, username, email, password)
    except (RegistrationError, OSError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return None
    print("User created successfully.")
    return user


def main(argv: list[str] | None = None) -> int:
    """Run the banking app."""
    parser = argparse.ArgumentParser(prog="kshbank", description="Banking app.")
    parser.add_argument(
        "--users-file",
        default=DEFAULT_USERS_FILE,
        help="CSV file holding the registered users (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    welcome(CSVStorage(args.users_file))
    return 0


if __name__ == "__main__":
    sys.exit(main())