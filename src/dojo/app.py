# src/dojo/app.py
"""
Application Entry Point - Command-Line Demo

This module serves as the composition root for the command-line tool.
It prints a sample formatted price, then converts a euro amount into
Krupnic and USD using the live exchange-rate source.

Files that USE this module:
- python -m dojo (module entry point)
- dojo console script (pyproject.toml)

Files that this module USES:
- dojo.shared.logging_conf (setup_logging for logging configuration)
- dojo.config (settings for logging and the exchange-rate URL)
- dojo.application (pricing and conversion)
- dojo.adapters.providers.open_er_api (LiveExchangeRateClient)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import argparse  # Command-line option parsing
import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import Optional, Sequence

from dojo.config import settings
from dojo.shared.logging_conf import setup_logging
from dojo.shared.validators import validate_numeric_input
from dojo.application.pricing import calculate_price_formatted
from dojo.application.converter import convert_currency
from dojo.adapters.providers.open_er_api import LiveExchangeRateClient
from dojo.domain.errors import ConversionError
from dojo.domain.models import Currency, Percentage

logger = logging.getLogger(__name__)


def _amount(value: str) -> float:
    if not validate_numeric_input(value, min_val=0.0):
        raise argparse.ArgumentTypeError(f"invalid amount: {value!r}")
    return float(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dojo",
        description="Print a sample price and convert a euro amount into other currencies.",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="exchange-rate source URL (defaults to EXCHANGE_RATE_URL)",
    )
    parser.add_argument(
        "--amount",
        type=_amount,
        default=20.0,
        help="euro amount to convert (default: 20.0)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command-line demo.

    Returns:
        Process exit status: 0 on success, 1 if a conversion failed
    """
    args = build_parser().parse_args(argv)

    setup_logging(
        level=settings.log_level_value,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        log_stdout=settings.log_stdout,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    print(calculate_price_formatted(5, 345, Percentage(10.0)))

    try:
        client = LiveExchangeRateClient(args.url)
    except ValueError as e:
        logger.error("%s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for currency in (Currency.KRUPNIC, Currency.USD):
        try:
            print(convert_currency(args.amount, currency, client))
        except ConversionError as e:
            logger.error("Conversion to %s failed: %s (type: %s)", currency.value, e, type(e).__name__)
            print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
