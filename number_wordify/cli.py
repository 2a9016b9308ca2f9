"""
cli.py — number-wordify
========================
Prints a monetary amount in words.

Usage:
  number-wordify 1234.56
  number-wordify 1000000 --scale indian
  number-wordify 12.5 --currency USD --singular
  number-wordify 7.125 --main-unit Dinars --sub-unit Fils --factor 1000
  python -m number_wordify 99.99 --log-level DEBUG --log-dir logs
"""

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

from number_wordify.core.config import get_config, get_log_level, validate_config
from number_wordify.core.logging_config import LoggingConfig
from number_wordify.exceptions import WordifyError
from number_wordify.services.currencies import currency_units
from number_wordify.services.scales import SCALE_SYSTEMS, get_scale_system
from number_wordify.services.words_service import format_currency_in_words
from number_wordify.version import APP_NAME, VERSION

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Spell a monetary amount in English words",
    )
    ap.add_argument("amount",
                    help="non-negative amount, e.g. 1234.56")
    ap.add_argument("--scale", type=str.lower, choices=sorted(SCALE_SYSTEMS),
                    help="digit grouping (default: WORDIFY_SCALE or international)")
    ap.add_argument("--currency",
                    help="ISO currency code (default: WORDIFY_CURRENCY or INR)")
    ap.add_argument("--main-unit",
                    help="whole-unit label, overrides the currency (requires --sub-unit)")
    ap.add_argument("--sub-unit",
                    help="fractional-unit label, overrides the currency (requires --main-unit)")
    ap.add_argument("--factor", type=int,
                    help="fractional units per whole unit (default: currency's, usually 100)")
    ap.add_argument("--singular", action="store_true", default=None,
                    help="use singular unit labels for one (e.g. 'One Rupee')")
    ap.add_argument("--log-level",
                    help="logging level (default: LOG_LEVEL or INFO)")
    ap.add_argument("--log-dir",
                    help="also write a rotating log file here and prune old ones "
                         "(default: WORDIFY_LOG_DIR, unset means no file)")
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    config = get_config()
    log_dir = args.log_dir or config.get("WORDIFY_LOG_DIR")
    LoggingConfig.setup_logging(log_level=args.log_level or get_log_level(), log_dir=log_dir)
    if log_dir:
        removed = LoggingConfig.cleanup_old_logs(
            log_dir, days_to_keep=config.get_int("WORDIFY_LOG_RETENTION_DAYS", default=30)
        )
        logger.debug(f"Removed {removed} old log file(s) from {log_dir}")

    if (args.main_unit is None) != (args.sub_unit is None):
        ap.error("--main-unit and --sub-unit must be given together")

    try:
        amount = Decimal(args.amount.strip().replace(",", ""))
    except InvalidOperation:
        print(f"error: not a number: {args.amount!r}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    try:
        validate_config()
        scale = get_scale_system(args.scale or config.get("WORDIFY_SCALE"))
        singular = args.singular if args.singular is not None else config.get_bool("WORDIFY_SINGULAR_UNITS")

        if args.main_unit is not None:
            main_unit, sub_unit = args.main_unit, args.sub_unit
            main_singular = sub_singular = None
            factor = args.factor if args.factor is not None else 100
        else:
            currency = currency_units(args.currency or config.get("WORDIFY_CURRENCY"))
            main_unit, sub_unit = currency.main_unit, currency.sub_unit
            main_singular = currency.main_unit_singular if singular else None
            sub_singular = currency.sub_unit_singular if singular else None
            factor = args.factor if args.factor is not None else currency.fractional_factor

        words = format_currency_in_words(
            amount, scale, main_unit, sub_unit, factor,
            main_unit_singular=main_singular,
            sub_unit_singular=sub_singular,
        )
    except WordifyError as e:
        logger.debug(f"Conversion failed: {e!r}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    print(words)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
