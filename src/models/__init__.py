"""Data models for the ATM withdrawal system."""

from .withdrawal import Outcome, WithdrawalQuote, WithdrawalResult
from .exceptions import (
    ATMError,
    InvalidInputError,
    WithdrawalRejectedError,
    NoBalanceError,
    InvalidAmountError,
    DailyLimitExceededError,
)
from .money import parse_money, format_money

__all__ = [
    "Outcome",
    "WithdrawalQuote",
    "WithdrawalResult",
    "ATMError",
    "InvalidInputError",
    "WithdrawalRejectedError",
    "NoBalanceError",
    "InvalidAmountError",
    "DailyLimitExceededError",
    "parse_money",
    "format_money",
]
