"""Custom exceptions for the ATM withdrawal system."""

from src.models.withdrawal import Outcome


class ATMError(Exception):
    """Base exception for all ATM-related errors."""
    pass


class InvalidInputError(ATMError):
    """Raised when user input cannot be read as the expected value."""
    pass


class WithdrawalRejectedError(ATMError):
    """
    Base exception for business-rule rejections.

    The message is the line shown to the user, and ``outcome`` records
    which rule rejected the withdrawal.
    """

    outcome: Outcome

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NoBalanceError(WithdrawalRejectedError):
    """Raised when the account balance is zero or negative."""

    outcome = Outcome.REJECTED_NO_BALANCE


class InvalidAmountError(WithdrawalRejectedError):
    """Raised when the requested amount is zero or negative."""

    outcome = Outcome.REJECTED_INVALID_AMOUNT


class DailyLimitExceededError(WithdrawalRejectedError):
    """Raised when the requested amount is above the daily maximum."""

    outcome = Outcome.REJECTED_EXCEEDS_DAILY_LIMIT
