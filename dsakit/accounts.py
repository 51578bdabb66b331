"""Bank accounts with savings interest and overdraft limits."""

from __future__ import annotations

from abc import ABC, abstractmethod


class InsufficientFunds(ValueError):
    """Raised when a withdrawal exceeds what the account allows."""


def _fmt(amount: float) -> str:
    return f"{amount:g}"


class Account(ABC):
    """An account with an owner and a balance."""

    def __init__(self, owner: str, balance: float) -> None:
        self.owner = owner
        self.balance = balance

    def deposit(self, amount: float) -> float:
        """Add ``amount`` and return the new balance."""
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take ``amount`` out and return the new balance."""
        if amount > self.balance:
            raise InsufficientFunds("Insufficient balance!")
        self.balance -= amount
        return self.balance

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line summary of the account."""


class SavingsAccount(Account):
    """An account that earns interest at a percentage rate."""

    def __init__(self, owner: str, balance: float, rate: float) -> None:
        super().__init__(owner, balance)
        self.interest_rate = rate

    def add_interest(self) -> float:
        """Credit interest on the current balance and return it."""
        interest = self.balance * (self.interest_rate / 100)
        self.balance += interest
        return interest

    def describe(self) -> str:
        return f"Savings Account - Owner: {self.owner}, Balance: {_fmt(self.balance)}"


class CurrentAccount(Account):
    """An account that may go overdrawn down to a limit."""

    def __init__(self, owner: str, balance: float, limit: float) -> None:
        super().__init__(owner, balance)
        self.overdraft_limit = limit

    def withdraw(self, amount: float) -> float:
        if amount > self.balance + self.overdraft_limit:
            raise InsufficientFunds("Exceeded overdraft limit!")
        self.balance -= amount
        return self.balance

    def describe(self) -> str:
        return f"Current Account - Owner: {self.owner}, Balance: {_fmt(self.balance)}"


def _deposit(account: Account, amount: float) -> None:
    balance = account.deposit(amount)
    print(f"Deposited: {_fmt(amount)} | New Balance: {_fmt(balance)}")


def _withdraw(account: Account, amount: float) -> None:
    try:
        balance = account.withdraw(amount)
    except InsufficientFunds as exc:
        print(exc)
    else:
        print(f"Withdrawn: {_fmt(amount)} | New Balance: {_fmt(balance)}")


def main(argv: list[str] | None = None) -> int:
    """Run a short session on a savings and a current account."""
    savings = SavingsAccount("Alice", 5000, 5)
    current = CurrentAccount("Bob", 3000, 1000)

    print(savings.describe())
    _deposit(savings, 1000)
    _withdraw(savings, 2000)
    interest = savings.add_interest()
    print(f"Interest Added: {_fmt(interest)} | New Balance: {_fmt(savings.balance)}")

    print()
    print(current.describe())
    _deposit(current, 500)
    _withdraw(current, 4000)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())