from __future__ import annotations

import pytest

from kshbank import cli
from kshbank.storage import CSVStorage

EMAIL = "jane@example.com"


def feed(monkeypatch: pytest.MonkeyPatch, *lines: str) -> None:
    remaining = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def storage(tmp_path):
    return CSVStorage(tmp_path / "users.csv")


def test_login_choice_is_returned(monkeypatch, capsys, storage):
    feed(monkeypatch, "1")
    assert cli.get_choice(storage) == 1
    assert "Logging in now." in capsys.readouterr().out


def test_non_number_asks_again(monkeypatch, capsys, storage):
    feed(monkeypatch, "abc", "3")
    assert cli.get_choice(storage) == 3
    out = capsys.readouterr().out
    assert "Invalid input. Please enter a number:" in out
    assert out.count("Choices.") == 2


def test_unknown_option_asks_again(monkeypatch, capsys, storage):
    feed(monkeypatch, "7", "4")
    assert cli.get_choice(storage) == 4
    out = capsys.readouterr().out
    assert "Invalid option. Please try again:" in out
    assert "Exiting the app. Goodbye!" in out


def test_end_of_input_stops_menu(monkeypatch, storage):
    feed(monkeypatch)
    assert cli.get_choice(storage) is None


def test_register_choice_stores_user(monkeypatch, storage):
    password = "placeholder"
    feed(monkeypatch, "2", "Jane", "Doe", "jane", EMAIL, password)
    assert cli.get_choice(storage) == 2
    user = storage.find_user_by_username("jane")
    assert user is not None
    assert (user.first_name, user.last_name, user.email, user.password) == (
        "Jane",
        "Doe",
        EMAIL,
        password,
    )


def test_register_user_short_password_refused(monkeypatch, capsys, storage):
    password = "secret"
    feed(monkeypatch, "Jane", "Doe", "jane", EMAIL, password)
    assert cli.register_user(storage) is None
    assert "Password too short." in capsys.readouterr().err
    assert storage.load_users() == []


def test_register_user_incomplete_input(monkeypatch, storage):
    feed(monkeypatch, "Jane", "Doe")
    assert cli.register_user(storage) is None
    assert storage.load_users() == []


def test_welcome_prints_greeting(monkeypatch, capsys, storage):
    feed(monkeypatch, "4")
    assert cli.welcome(storage) == 4
    out = capsys.readouterr().out
    assert "How can we assist you today?" in out
    assert out.index("Please choose an option below:") < out.index("Choices.")


def test_select_options(capsys):
    cli.select_options()
    assert capsys.readouterr().out == "more options here"


def test_main_uses_given_users_file(monkeypatch, tmp_path):
    users_file = tmp_path / "people.csv"
    password = "placeholder"
    feed(monkeypatch, "2", "Jane", "Doe", "jane", EMAIL, password)
    assert cli.main(["--users-file", str(users_file)]) == 0
    lines = users_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "FirstName,LastName,Username,Email,Password"
    assert lines[1] == f"Jane,Doe,jane,{EMAIL},{password}"