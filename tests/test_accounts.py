import pytest

from dsakit.accounts import (
    Account,
    CurrentAccount,
    InsufficientFunds,
    SavingsAccount,
    main,
)


def test_account_is_abstract():
    with pytest.raises(TypeError):
        Account("Alice", 100)


def test_describe_savings():
    acc = SavingsAccount("Alice", 5000, 5)
    assert acc.describe() == "Savings Account - Owner: Alice, Balance: 5000"


def test_describe_current():
    acc = CurrentAccount("Bob", 3000, 1000)
    assert acc.describe() == "Current Account - Owner: Bob, Balance: 3000"


def test_deposit_then_withdraw_round_trip():
    acc = SavingsAccount("Alice", 5000, 5)
    after_deposit = acc.deposit(1000)
    assert after_deposit == 5000 + 1000
    assert acc.withdraw(1000) == 5000
    assert acc.balance == 5000


def test_savings_withdraw_exact_balance():
    acc = SavingsAccount("Alice", 300, 5)
    assert acc.withdraw(300) == 0


def test_savings_insufficient_balance():
    acc = SavingsAccount("Alice", 100, 5)
    with pytest.raises(InsufficientFunds, match="Insufficient balance!"):
        acc.withdraw(101)
    assert acc.balance == 100


def test_add_interest_credits_returned_amount():
    acc = SavingsAccount("Alice", 4000, 5)
    before = acc.balance
    interest = acc.add_interest()
    assert acc.balance == pytest.approx(before + interest)
    assert interest == pytest.approx(before * 5 / 100)


def test_zero_rate_adds_nothing():
    acc = SavingsAccount("Alice", 4000, 0)
    assert acc.add_interest() == 0
    assert acc.balance == 4000


def test_current_overdraft_allowed():
    acc = CurrentAccount("Bob", 3000, 1000)
    assert acc.withdraw(3000 + 1000) == -1000


def test_current_overdraft_exceeded():
    acc = CurrentAccount("Bob", 3000, 1000)
    with pytest.raises(InsufficientFunds, match="Exceeded overdraft limit!"):
        acc.withdraw(4001)
    assert acc.balance == 3000


def test_insufficient_funds_is_value_error():
    acc = CurrentAccount("Bob", 0, 0)
    with pytest.raises(ValueError):
        acc.withdraw(1)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Savings Account - Owner: Alice, Balance: 5000" in out
    assert "Current Account - Owner: Bob, Balance: 3000" in out
    assert "Interest Added:" in out
    assert "Exceeded overdraft limit!" not in out