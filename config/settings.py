"""Configuration management for the ATM withdrawal simulator."""
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from src.models.money import MAX_DIGITS, fits_precision

TRUE_VALUES = ('1', 'true', 'yes', 'on')
FALSE_VALUES = ('0', 'false', 'no', 'off', '')


def _decimal_env(name: str, default: Decimal) -> Decimal:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise ValueError(f"{name} must be a decimal number, got {raw!r}") from None
    if not value.is_finite() or value < 0:
        raise ValueError(f"{name} must be a non-negative decimal number, got {raw!r}")
    if not fits_precision(value):
        raise ValueError(f"{name} must have at most {MAX_DIGITS} digits, got {raw!r}")
    return value


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass
class Settings:
    """Configuration settings for the ATM withdrawal simulator.

    This class centralizes the business rules and runtime options so the
    service and the console never hardcode them.
    """

    # Business Rules
    max_withdrawal: Decimal = Decimal('500.00')
    service_charge_threshold: Decimal = Decimal('300.00')
    service_charge_rate: Decimal = Decimal('0.04')
    low_funds_charge: Decimal = Decimal('25.00')

    # Logging Configuration
    log_file: str = 'atm.log'
    log_level: str = 'INFO'

    # Console Configuration
    print_receipt: bool = False

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Every variable is optional; unset variables keep their defaults.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If an environment variable holds an unusable value.
        """
        defaults = cls()

        log_level = os.getenv('ATM_LOG_LEVEL', defaults.log_level).strip().upper()
        if log_level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f"ATM_LOG_LEVEL must be a logging level name, got {log_level!r}")

        return cls(
            max_withdrawal=_decimal_env('ATM_MAX_WITHDRAWAL', defaults.max_withdrawal),
            service_charge_threshold=_decimal_env(
                'ATM_SERVICE_CHARGE_THRESHOLD', defaults.service_charge_threshold
            ),
            service_charge_rate=_decimal_env('ATM_SERVICE_CHARGE_RATE', defaults.service_charge_rate),
            low_funds_charge=_decimal_env('ATM_LOW_FUNDS_CHARGE', defaults.low_funds_charge),
            log_file=os.getenv('ATM_LOG_FILE', defaults.log_file),
            log_level=log_level,
            print_receipt=_bool_env('ATM_PRINT_RECEIPT', defaults.print_receipt),
        )
