"""Tests for data models and exceptions."""

from decimal import Decimal

import pytest

from src.models.withdrawal import Outcome, WithdrawalQuote, WithdrawalResult
from src.models.exceptions import (
    ATMError,
    InvalidInputError,
    WithdrawalRejectedError,
    NoBalanceError,
    InvalidAmountError,
    DailyLimitExceededError,
)


def test_quote_properties():
    """Test a quote reports whether it is charged and covered."""
    quote = WithdrawalQuote(
        balance=Decimal("1000"),
        requested=Decimal("400"),
        service_charge=Decimal("4.00"),
        deduction=Decimal("404.00"),
    )

    assert quote.charged is True
    assert quote.covered is True


def test_quote_not_charged_and_not_covered():
    """Test a quote without a service charge that exceeds the balance."""
    quote = WithdrawalQuote(
        balance=Decimal("100"),
        requested=Decimal("200"),
        service_charge=Decimal("0"),
        deduction=Decimal("200"),
    )

    assert quote.charged is False
    assert quote.covered is False


def test_quote_covered_at_exact_balance():
    """A deduction equal to the balance is covered."""
    quote = WithdrawalQuote(
        balance=Decimal("200"),
        requested=Decimal("200"),
        service_charge=Decimal("0"),
        deduction=Decimal("200"),
    )

    assert quote.covered is True


def test_result_unchanged():
    """Test creating a result that leaves the balance untouched."""
    result = WithdrawalResult.unchanged(
        Outcome.CANCELLED_BY_USER, Decimal("50"), Decimal("400")
    )

    assert result.outcome == Outcome.CANCELLED_BY_USER
    assert result.balance == Decimal("50")
    assert result.new_balance == Decimal("50")
    assert result.requested == Decimal("400")
    assert result.deduction == 0
    assert result.service_charge == 0
    assert result.low_funds_charge == 0
    assert result.completed is False


@pytest.mark.parametrize(
    "outcome, completed",
    [
        (Outcome.REJECTED_NO_BALANCE, False),
        (Outcome.REJECTED_INVALID_AMOUNT, False),
        (Outcome.REJECTED_EXCEEDS_DAILY_LIMIT, False),
        (Outcome.COMPLETED_STANDARD, True),
        (Outcome.COMPLETED_WITH_SERVICE_CHARGE, True),
        (Outcome.COMPLETED_WITH_LOW_FUNDS_CHARGE, True),
        (Outcome.REJECTED_STILL_INSUFFICIENT, False),
        (Outcome.CANCELLED_BY_USER, False),
    ],
)
def test_outcome_completed(outcome, completed):
    """Only the three completed outcomes debit the balance."""
    assert outcome.completed is completed


def test_exceptions_hierarchy():
    """Test that all custom exceptions inherit from ATMError."""
    assert issubclass(InvalidInputError, ATMError)
    assert issubclass(WithdrawalRejectedError, ATMError)
    assert issubclass(NoBalanceError, WithdrawalRejectedError)
    assert issubclass(InvalidAmountError, WithdrawalRejectedError)
    assert issubclass(DailyLimitExceededError, WithdrawalRejectedError)

    # Input errors are faults, not business rejections
    assert not issubclass(InvalidInputError, WithdrawalRejectedError)


def test_rejections_carry_outcome_and_message():
    """Each rejection exposes its outcome and the user-facing message."""
    cases = [
        (NoBalanceError("no balance"), Outcome.REJECTED_NO_BALANCE),
        (InvalidAmountError("bad amount"), Outcome.REJECTED_INVALID_AMOUNT),
        (DailyLimitExceededError("too much"), Outcome.REJECTED_EXCEEDS_DAILY_LIMIT),
    ]

    for error, outcome in cases:
        assert isinstance(error, ATMError)
        assert error.outcome == outcome
        assert error.message == str(error)
