"""Withdrawal data models."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

ZERO = Decimal("0")


class Outcome(Enum):
    """Final state of a withdrawal attempt."""

    REJECTED_NO_BALANCE = "rejected-no-balance"
    REJECTED_INVALID_AMOUNT = "rejected-invalid-amount"
    REJECTED_EXCEEDS_DAILY_LIMIT = "rejected-exceeds-daily-limit"
    COMPLETED_STANDARD = "completed-standard"
    COMPLETED_WITH_SERVICE_CHARGE = "completed-with-service-charge"
    COMPLETED_WITH_LOW_FUNDS_CHARGE = "completed-with-low-funds-charge"
    REJECTED_STILL_INSUFFICIENT = "rejected-still-insufficient"
    CANCELLED_BY_USER = "cancelled-by-user"

    @property
    def completed(self) -> bool:
        """Whether the balance was debited."""
        return self in (
            Outcome.COMPLETED_STANDARD,
            Outcome.COMPLETED_WITH_SERVICE_CHARGE,
            Outcome.COMPLETED_WITH_LOW_FUNDS_CHARGE,
        )


@dataclass(frozen=True)
class WithdrawalQuote:
    """A validated withdrawal request priced against a balance."""

    balance: Decimal
    requested: Decimal
    service_charge: Decimal
    deduction: Decimal

    @property
    def charged(self) -> bool:
        """Whether the tiered service charge applies."""
        return self.service_charge > ZERO

    @property
    def covered(self) -> bool:
        """Whether the balance covers the full deduction."""
        return self.deduction <= self.balance


@dataclass(frozen=True)
class WithdrawalResult:
    """Represents the result of a single withdrawal attempt."""

    outcome: Outcome
    balance: Decimal
    new_balance: Decimal
    requested: Decimal | None = None
    service_charge: Decimal = ZERO
    low_funds_charge: Decimal = ZERO
    deduction: Decimal = ZERO

    @classmethod
    def unchanged(
        cls,
        outcome: Outcome,
        balance: Decimal,
        requested: Decimal | None = None,
    ) -> "WithdrawalResult":
        """
        Create a result that leaves the balance untouched.

        Args:
            outcome: The rejection or cancellation outcome
            balance: The account balance, reported as both old and new
            requested: The requested amount, if it was read

        Returns:
            A WithdrawalResult with new_balance equal to balance and no deduction
        """
        return cls(
            outcome=outcome,
            balance=balance,
            new_balance=balance,
            requested=requested,
        )

    @property
    def completed(self) -> bool:
        return self.outcome.completed
