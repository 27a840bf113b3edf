import logging
import sys
from collections.abc import Callable

from dotenv import load_dotenv

from config.settings import Settings
from src.cli.atm_console import ATMConsole
from src.models.exceptions import InvalidInputError
from src.services.withdrawal_service import WithdrawalService

logger = logging.getLogger('atm')

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_BAD_CONFIG = 2


def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    root.setLevel(settings.log_level)
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='a')
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    root.addHandler(handler)


def main(
    read: Callable[[str], str | None] | None = None,
    write: Callable[[str], None] = print,
) -> int:
    load_dotenv()

    try:
        settings = Settings.load()
    except ValueError as err:
        print(f"Configuration error: {err}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    try:
        setup_logging(settings)
    except OSError as err:
        print(f"Configuration error: cannot open log file: {err}", file=sys.stderr)
        return EXIT_BAD_CONFIG

    service = WithdrawalService(
        max_withdrawal=settings.max_withdrawal,
        service_charge_threshold=settings.service_charge_threshold,
        service_charge_rate=settings.service_charge_rate,
        low_funds_charge=settings.low_funds_charge,
    )
    console_kwargs = {'write': write, 'print_receipt': settings.print_receipt}
    if read is not None:
        console_kwargs['read'] = read
    console = ATMConsole(service, **console_kwargs)

    try:
        result = console.run()
    except InvalidInputError as err:
        logger.error("Session aborted: %s", err)
        print(f"Invalid input: {err}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    logger.info("Session finished with %s", result.outcome.value)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
