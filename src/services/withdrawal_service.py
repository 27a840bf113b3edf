"""Withdrawal service for business logic layer."""

import logging
from collections.abc import Callable
from decimal import Decimal, localcontext

from src.models.exceptions import (
    DailyLimitExceededError,
    InvalidAmountError,
    NoBalanceError,
    WithdrawalRejectedError,
)
from src.models.money import EXACT_CONTEXT, format_limit
from src.models.withdrawal import ZERO, Outcome, WithdrawalQuote, WithdrawalResult

logger = logging.getLogger(__name__)

ConfirmLowFundsCharge = Callable[[WithdrawalQuote], bool]


class WithdrawalService:
    """Service layer that evaluates a single ATM withdrawal."""

    def __init__(
        self,
        max_withdrawal: Decimal = Decimal("500.00"),
        service_charge_threshold: Decimal = Decimal("300.00"),
        service_charge_rate: Decimal = Decimal("0.04"),
        low_funds_charge: Decimal = Decimal("25.00"),
    ):
        """
        Initialize the WithdrawalService with its business rules.

        Args:
            max_withdrawal: Largest amount allowed in a single request (default: 500.00)
            service_charge_threshold: Amounts above this are charged on the excess (default: 300.00)
            service_charge_rate: Rate applied to the excess over the threshold (default: 0.04)
            low_funds_charge: Flat charge offered when the balance is short (default: 25.00)
        """
        self._max_withdrawal = max_withdrawal
        self._service_charge_threshold = service_charge_threshold
        self._service_charge_rate = service_charge_rate
        self._low_funds_charge = low_funds_charge

    @property
    def low_funds_charge(self) -> Decimal:
        return self._low_funds_charge

    def check_balance(self, balance: Decimal) -> None:
        """
        Ensure the account has money to withdraw from.

        Raises:
            NoBalanceError: If the balance is zero or negative
        """
        if balance <= ZERO:
            raise NoBalanceError(
                "Withdrawal not allowed. Your account has insufficient or negative balance."
            )

    def quote(self, balance: Decimal, requested: Decimal) -> WithdrawalQuote:
        """
        Validate a withdrawal request and price it.

        The guards run in a fixed order and the first failure wins: balance,
        then amount, then daily maximum. The service charge applies only to
        the part of the request above the threshold and is not rounded.

        Args:
            balance: The current account balance
            requested: The amount the user wants to withdraw

        Returns:
            The WithdrawalQuote with the service charge and total deduction

        Raises:
            NoBalanceError: If the balance is zero or negative
            InvalidAmountError: If the requested amount is zero or negative
            DailyLimitExceededError: If the requested amount exceeds the daily maximum
        """
        self.check_balance(balance)

        if requested <= ZERO:
            raise InvalidAmountError("Invalid withdrawal amount.")
        if requested > self._max_withdrawal:
            raise DailyLimitExceededError(
                f"You can only withdraw a maximum of ${format_limit(self._max_withdrawal)} per day."
            )

        with localcontext(EXACT_CONTEXT):
            service_charge = ZERO
            if requested > self._service_charge_threshold:
                service_charge = (
                    requested - self._service_charge_threshold
                ) * self._service_charge_rate

            quote = WithdrawalQuote(
                balance=balance,
                requested=requested,
                service_charge=service_charge,
                deduction=requested + service_charge,
            )
        logger.debug(
            "Quoted withdrawal of %s against balance %s: charge %s, deduction %s",
            requested,
            balance,
            service_charge,
            quote.deduction,
        )
        return quote

    def settle(
        self,
        quote: WithdrawalQuote,
        accept_low_funds_charge: bool | None = None,
    ) -> WithdrawalResult:
        """
        Settle a priced withdrawal against the balance.

        When the balance covers the deduction the withdrawal completes and the
        answer to the low-funds offer is ignored. Otherwise the user may accept
        the flat low-funds charge in place of the service charge.

        Args:
            quote: The quote returned by quote()
            accept_low_funds_charge: The user's answer to the low-funds offer;
                None or False declines it

        Returns:
            The WithdrawalResult with the new balance
        """
        if quote.covered:
            outcome = (
                Outcome.COMPLETED_WITH_SERVICE_CHARGE
                if quote.charged
                else Outcome.COMPLETED_STANDARD
            )
            with localcontext(EXACT_CONTEXT):
                new_balance = quote.balance - quote.deduction
            result = WithdrawalResult(
                outcome=outcome,
                balance=quote.balance,
                new_balance=new_balance,
                requested=quote.requested,
                service_charge=quote.service_charge,
                deduction=quote.deduction,
            )
        elif not accept_low_funds_charge:
            result = WithdrawalResult.unchanged(
                Outcome.CANCELLED_BY_USER, quote.balance, quote.requested
            )
        else:
            # Flat charge replaces the service charge
            with localcontext(EXACT_CONTEXT):
                deduction = quote.requested + self._low_funds_charge
                new_balance = quote.balance - deduction
            if deduction > quote.balance:
                result = WithdrawalResult.unchanged(
                    Outcome.REJECTED_STILL_INSUFFICIENT, quote.balance, quote.requested
                )
            else:
                result = WithdrawalResult(
                    outcome=Outcome.COMPLETED_WITH_LOW_FUNDS_CHARGE,
                    balance=quote.balance,
                    new_balance=new_balance,
                    requested=quote.requested,
                    low_funds_charge=self._low_funds_charge,
                    deduction=deduction,
                )

        logger.info(
            "Withdrawal of %s settled as %s, balance %s -> %s",
            quote.requested,
            result.outcome.value,
            result.balance,
            result.new_balance,
        )
        return result

    def evaluate(
        self,
        balance: Decimal,
        requested: Decimal,
        confirm: ConfirmLowFundsCharge | None = None,
    ) -> WithdrawalResult:
        """
        Run the full withdrawal rules without any console I/O.

        Args:
            balance: The current account balance
            requested: The amount the user wants to withdraw
            confirm: Called with the quote only when the balance is short;
                returns whether the user accepts the low-funds charge.
                Without it the offer counts as declined.

        Returns:
            The WithdrawalResult; rejections are returned, not raised
        """
        try:
            quote = self.quote(balance, requested)
        except WithdrawalRejectedError as err:
            logger.info("Withdrawal of %s rejected: %s", requested, err.outcome.value)
            return WithdrawalResult.unchanged(err.outcome, balance, requested)

        accepted = None
        if not quote.covered and confirm is not None:
            accepted = confirm(quote)
        return self.settle(quote, accepted)
