# kshbank

A small banking toolkit with an interactive console front end.

It offers:

- **Users** stored one per line in a CSV file. A header row
  (`FirstName,LastName,Username,Email,Password`) is written when the file
  is first created.
- **Registration and login.** A new user is turned down if the password
  is shorter than 9 characters, or if the username or the e-mail address
  is already in use.
- **Accounts** in Kenyan shillings. A `BankAccount` keeps a Ksh 100
  reserve on withdrawals and transfers. A `SavingAccount` needs an opening
  balance of at least Ksh 10,000, keeps a minimum balance of Ksh 10,000 on
  transfers and allows 3 withdrawals a month.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The console app

```
kshbank
kshbank --users-file path/to/users.csv
```

Users are kept in `users.csv` in the current directory unless
`--users-file` names another file.

The app shows a welcome banner and a menu:

```
1). Login
2). Register new user.
3). Explore the features of the app
```

Choosing **2** asks for your first name, last name, username, e-mail
address and password (the first word of each answer is taken), then
registers the user. On success it prints `User created successfully.`;
if registration is refused, the reason is printed to standard error.
Choosing **4**, which is not listed, prints a goodbye message. Anything
that is not a number, or not one of these choices, is asked for again.
The app ends after one accepted choice, or when input runs out.

## Using the library

### Registering and logging in

```python
from getpass import getpass

from kshbank.auth import Auth, RegistrationError
from kshbank.storage import CSVStorage

storage = CSVStorage("users.csv")
auth = Auth(storage)

password = getpass()
try:
    user = auth.register_user("Jane", "Doe", "jdoe", "jane@example.com", password)
except RegistrationError as exc:
    print(f"Registration refused: {exc}")

if auth.login("jdoe", password):
    print("Welcome back!")
```

`Auth.register_user` returns the stored `kshbank.user.User` and raises
`RegistrationError` when the password is too short, the username or
e-mail address is taken, or the storage refuses the user. `Auth.login`
returns `True` only when the user exists and the password matches.

`CSVStorage` also answers direct questions about its users:

```python
storage.is_username_taken("jdoe")
storage.is_email_taken("jane@example.com")
user = storage.find_user_by_username("jdoe")   # None if there is no such user
all_users = storage.load_users()                # [] if the file does not exist
```

`CSVStorage.save_user` returns `False` instead of writing when the
username or e-mail address is already in the file. `User.to_csv()` gives
the line a user is stored as.

Other storage back ends can subclass `kshbank.storage.Storage` and provide
`save_user`, `is_username_taken`, `is_email_taken` and
`find_user_by_username`.

### Accounts

```python
from kshbank.accounts import (
    BankAccount,
    InsufficientFundsError,
    SavingAccount,
    WithdrawalLimitError,
)

current = BankAccount("Jane Doe", "ACC-0001", 20000.0)
current.deposit(500.0)
current.withdraw(1000.0)

savings = SavingAccount("Jane Doe", "ACC-0002", 50000.0, 4.5)
other = SavingAccount("John Doe", "ACC-0003", 15000.0, 4.5)

try:
    savings.transfer(other, 2000.0)
    savings.withdraw(500.0)
except InsufficientFundsError:
    print("Not enough money in the account.")
except WithdrawalLimitError:
    print("Monthly withdrawal limit reached.")

savings.show_account_details()
```

A `BankAccount` created without a balance starts at 0; one created with a
balance below Ksh 10,000 raises `ValueError`. `deposit` and `withdraw`
return the new balance. Transfers of zero or less move nothing. Saving
account transfers count towards the monthly withdrawals.

`SavingAccount.account_details()` returns the summary as text instead of
printing it. `kshbank.accounts.current_date()` gives today's date in
`YYYY-MM-DD` form, which is also the opening date a new saving account is
given.

## What it does not do

- The console app's **Login** and **Explore** choices only print a message:
  they do not ask for credentials or show anything further. Use
  `Auth.login` from Python to check a login.
- Passwords are stored and compared as plain text; they are not hashed.
- `CSVStorage` is the only storage back end; there is no database back end.
- Accounts live in memory only; nothing saves or loads them, and monthly
  withdrawal counts are never reset.