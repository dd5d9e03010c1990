"""Password-protected bank accounts with an interactive menu."""

from __future__ import annotations

import argparse

__all__ = [
    "BankError",
    "AccountExistsError",
    "AccountNotFoundError",
    "AuthenticationError",
    "InsufficientFundsError",
    "Bank",
    "main",
]


class BankError(Exception):
    """Base class for every error the bank reports."""


class AccountExistsError(BankError):
    """An account with that name is already open."""


class AccountNotFoundError(BankError, KeyError):
    """No account is held under that name."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class AuthenticationError(BankError):
    """The password given does not match the account's."""


class InsufficientFundsError(BankError):
    """The balance does not cover the requested withdrawal."""


class Bank:
    """Accounts keyed by holder name, each guarded by a password."""

    def __init__(self) -> None:
        self._balances: dict[str, float] = {}
        self._passwords: dict[str, str] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._balances

    def create_account(self, name: str, initial_amount: float, password: str) -> None:
        """Open an account holding ``initial_amount``."""
        if name in self._balances:
            raise AccountExistsError("Account already Exist")
        self._balances[name] = float(initial_amount)
        self._passwords[name] = password

    def _authorise(self, name: str, password: str) -> None:
        if name not in self._balances:
            raise AccountNotFoundError("Account does not Exist")
        if self._passwords[name] != password:
            raise AuthenticationError("Incorrect Password")

    def deposit(self, name: str, amount: float, password: str) -> float:
        """Add ``amount`` to the account and return the new balance."""
        self._authorise(name, password)
        self._balances[name] += amount
        return self._balances[name]

    def withdraw(self, name: str, amount: float, password: str) -> float:
        """Take ``amount`` out of the account and return the new balance.

        The balance must be strictly greater than the amount withdrawn.
        """
        self._authorise(name, password)
        if not self._balances[name] > amount:
            raise InsufficientFundsError("Insufficent Balance")
        self._balances[name] -= amount
        return self._balances[name]

    def balance(self, name: str, password: str) -> float:
        """Return the current balance of the account."""
        self._authorise(name, password)
        return self._balances[name]


_MENU = "\n".join(
    [
        "**Select Option **",
        "1.CREATE ACCOUNT",
        "2.DEPOSIT",
        "3.WITHDROWL",
        "4.CHECK BALANCE",
        "5.Exit",
        "enter your Choice :",
    ]
)


def _ask_name() -> str:
    print("enter your name :")
    return input().strip()


def _ask_amount() -> float:
    print("enter Amount ")
    return float(input().strip())


def _ask_password() -> str:
    return input("enter your password:").strip()


def _create(bank: Bank) -> None:
    name = _ask_name()
    amount = _ask_amount()
    print("set your Password")
    secret_word = input().strip()
    bank.create_account(name, amount, secret_word)
    print("Account Created Sucessfully")


def _deposit(bank: Bank) -> None:
    name = _ask_name()
    amount = _ask_amount()
    if name not in bank:
        raise AccountNotFoundError("Account does not Exist")
    bank.deposit(name, amount, _ask_password())
    print("Account Deposit Sucessfully")


def _withdraw(bank: Bank) -> None:
    name = _ask_name()
    amount = _ask_amount()
    if name not in bank:
        raise AccountNotFoundError("Account does not Exist")
    bank.withdraw(name, amount, _ask_password())
    print("Account Withdraw Sucessfully")


def _check_balance(bank: Bank) -> None:
    name = _ask_name()
    if name not in bank:
        raise AccountNotFoundError("Account does not Exist")
    value = bank.balance(name, _ask_password())
    print(f"Balance for Account {name} is {value:g}")


_ACTIONS = {1: _create, 2: _deposit, 3: _withdraw, 4: _check_balance}


def main(argv: list[str] | None = None) -> int:
    """Run the interactive banking menu until the user exits."""
    argparse.ArgumentParser(
        prog="bank", description="Interactive bank account manager."
    ).parse_args(argv)
    bank = Bank()
    try:
        while True:
            print(_MENU)
            try:
                choice = int(input().strip())
            except ValueError:
                choice = 0
            if choice == 5:
                print("Existing the Program Thanku 😊")
                return 0
            action = _ACTIONS.get(choice)
            if action is None:
                print("Invalid Choice ! Please try again ")
                continue
            try:
                action(bank)
            except BankError as error:
                print(error)
            except ValueError:
                print("Invalid amount")
    except EOFError:
        return 0