"""Bank and saving accounts held in Kenyan shillings."""

from __future__ import annotations

import sys
from datetime import date

MIN_OPENING_BALANCE = 10000.0
RESERVE = 100.0
MIN_WITHDRAW_BALANCE = 50.0


class InsufficientFundsError(Exception):
    """The account holds too little money for the operation."""

    def __init__(self, balance: float, available: float) -> None:
        super().__init__(
            f"Insufficient funds: balance {balance}, available {available}"
        )
        self.balance = balance
        self.available = available


class WithdrawalLimitError(Exception):
    """The monthly number of withdrawals has been reached."""


def current_date() -> str:
    """Return today's local date as YYYY-MM-DD."""
    return date.today().strftime("%Y-%m-%d")


class BankAccount:
    """A plain account that always keeps a reserve of Ksh 100."""

    def __init__(
        self,
        account_holder: str,
        account_number: str,
        balance: float | None = None,
    ) -> None:
        if balance is None:
            balance = 0.0
        elif balance < MIN_OPENING_BALANCE:
            raise ValueError("Initial balance must be at least Ksh 10,000.")
        self.account_holder = account_holder
        self.account_number = account_number
        self.balance = balance

    def deposit(self, amount: float) -> float:
        """Add money and return the new balance."""
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take money out, keeping the reserve, and return the new balance."""
        if self.balance - RESERVE <= amount:
            raise InsufficientFundsError(self.balance, self.balance - RESERVE)
        if self.balance <= MIN_WITHDRAW_BALANCE:
            raise ValueError("Minimum withdraw amount is ksh50")
        self.balance -= amount
        return self.balance

    def transfer(self, to: BankAccount, amount: float) -> None:
        """Move money to another account; non-positive amounts move nothing."""
        if self.balance - RESERVE <= amount:
            raise InsufficientFundsError(self.balance, self.balance - RESERVE)
        if amount > 0:
            self.balance -= amount
            to.deposit(amount)


class SavingAccount(BankAccount):
    """A saving account with an interest rate and a monthly withdrawal limit."""

    def __init__(
        self,
        account_holder: str,
        account_number: str,
        balance: float,
        interest_rate: float,
    ) -> None:
        super().__init__(account_holder, account_number, balance)
        self.created_on = current_date()
        self.interest_rate = interest_rate
        self.minimum_balance = 10000.0
        self.monthly_withdrawals = 0
        self.max_withdrawals = 3
        self.account_type = "Basic"

    def withdraw(self, amount: float) -> float:
        """Take money out within the monthly limit and return the new balance."""
        if self.monthly_withdrawals >= self.max_withdrawals:
            raise WithdrawalLimitError(
                "You have reached the allowed withdrawals per month."
            )
        if self.balance < amount:
            raise InsufficientFundsError(self.balance, self.balance)
        self.balance -= amount
        self.monthly_withdrawals += 1
        return self.balance

    def transfer(self, to: BankAccount, amount: float) -> None:
        """Move money to another account, keeping the minimum balance."""
        if self.balance - self.minimum_balance <= amount:
            raise InsufficientFundsError(
                self.balance, self.balance - self.minimum_balance
            )
        if amount > 0:
            self.balance -= amount
            to.balance += amount
            self.monthly_withdrawals += 1

    def account_details(self) -> str:
        """Return the account summary as printable text."""

        def row(label: str, value: object) -> str:
            return f"{label:<25}{value}\n"

        return "".join(
            [
                "\n================== Account Summary ==================\n",
                row("Date:", current_date()),
                row("Account Type:", f"Saving account ({self.account_type})"),
                row("Opening Date:", self.created_on),
                "\n------------------ Holder Details -------------------\n",
                row("Account Holder:", self.account_holder),
                row("Account Number:", self.account_number),
                "\n------------------ Financial Info -------------------\n",
                row("Account Balance: Ksh", f"{self.balance:.2f}"),
                row("Interest Rate:", f"{self.interest_rate:.2f} %"),
                row("Minimum Balance: Ksh", f"{self.minimum_balance:.2f}"),
                row("Withdrawals/Month:", self.monthly_withdrawals),
                row("Max Withdrawals/Month:", self.max_withdrawals),
                "======================================================\n\n",
            ]
        )

    def show_account_details(self) -> str:
        """Write the account summary to standard output and return it."""
        text = self.account_details()
        sys.stdout.write(text)
        sys.stdout.flush()
        return text