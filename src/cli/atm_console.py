"""Interactive console session for a single ATM withdrawal."""

import logging
from collections.abc import Callable
from decimal import Decimal

from tabulate import tabulate

from src.models.exceptions import InvalidInputError, WithdrawalRejectedError
from src.models.money import format_charge, format_money, parse_money
from src.models.withdrawal import Outcome, WithdrawalQuote, WithdrawalResult
from src.services.withdrawal_service import WithdrawalService

logger = logging.getLogger(__name__)

BALANCE_PROMPT = "Enter your account balance: $"
AMOUNT_PROMPT = "Enter the amount you wish to withdraw: $"


def _read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


class ATMConsole:
    """Drives one withdrawal over a line-based text interface."""

    def __init__(
        self,
        service: WithdrawalService,
        read: Callable[[str], str | None] = _read_line,
        write: Callable[[str], None] = print,
        print_receipt: bool = False,
    ):
        """
        Args:
            service: The service that applies the withdrawal rules
            read: Shows a prompt and returns the next line, or None at end of input
            write: Outputs one line of text
            print_receipt: Print a summary table after the final message
        """
        self._service = service
        self._read = read
        self._write = write
        self._print_receipt = print_receipt

    def run(self) -> WithdrawalResult:
        """
        Run one withdrawal session.

        Returns:
            The WithdrawalResult of the session

        Raises:
            InvalidInputError: If the balance or amount cannot be parsed
        """
        balance = self._read_amount(BALANCE_PROMPT)
        requested = None
        try:
            self._service.check_balance(balance)
            requested = self._read_amount(AMOUNT_PROMPT)
            quote = self._service.quote(balance, requested)
        except WithdrawalRejectedError as err:
            self._write(err.message)
            result = WithdrawalResult.unchanged(err.outcome, balance, requested)
        else:
            result = self._settle(quote)

        if self._print_receipt:
            self._write(self.receipt(result))
        return result

    def _settle(self, quote: WithdrawalQuote) -> WithdrawalResult:
        if quote.charged:
            self._write(
                f"A service charge of ${format_charge(quote.service_charge)} will be applied."
            )

        accepted = None
        if not quote.covered:
            self._write(f"Insufficient funds. Your balance is ${format_money(quote.balance)}.")
            accepted = self._confirm(
                "Would you like to proceed with a "
                f"${format_money(self._service.low_funds_charge)} service charge instead? (Y/N): "
            )

        result = self._service.settle(quote, accepted)
        for line in self._final_lines(result):
            self._write(line)
        return result

    def _final_lines(self, result: WithdrawalResult) -> list[str]:
        new_balance = f"New account balance: ${format_money(result.new_balance)}"
        if result.outcome is Outcome.COMPLETED_WITH_LOW_FUNDS_CHARGE:
            return [
                f"Transaction successful with ${format_money(result.low_funds_charge)} charge.",
                new_balance,
            ]
        if result.completed:
            return [
                f"Transaction successful. ${format_money(result.requested)} withdrawn.",
                new_balance,
            ]
        if result.outcome is Outcome.REJECTED_STILL_INSUFFICIENT:
            return ["Still not enough funds. Transaction canceled."]
        return ["Transaction canceled by user."]

    def _read_amount(self, prompt: str) -> Decimal:
        text = self._read(prompt)
        try:
            return parse_money(text)
        except InvalidInputError:
            logger.warning("Rejected input %r for prompt %r", text, prompt)
            raise

    def _confirm(self, prompt: str) -> bool:
        # Only the first non-blank character counts
        answer = (self._read(prompt) or "").strip()
        return answer[:1].lower() == "y"

    @staticmethod
    def receipt(result: WithdrawalResult) -> str:
        """
        Render a withdrawal result as a plain-text receipt table.

        Args:
            result: The result to render

        Returns:
            The receipt as a multi-line string
        """
        requested = "-" if result.requested is None else format_money(result.requested)
        rows = [
            ["Outcome", result.outcome.value],
            ["Starting balance", format_money(result.balance)],
            ["Withdrawal", requested],
            ["Service charge", format_charge(result.service_charge)],
            ["Low-funds charge", format_money(result.low_funds_charge)],
            ["Total deduction", format_money(result.deduction)],
            ["New balance", format_money(result.new_balance)],
        ]
        return tabulate(
            rows, headers=["Item", "Amount"], stralign="right", disable_numparse=True
        )
