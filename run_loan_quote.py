#!/usr/bin/env python3
"""
Loan Quote Calculator - Command Line Runner

This script loads a lender market file and prints the best quote the market
can offer for the requested amount:

    python run_loan_quote.py market.csv 1000
"""

import argparse
import logging
import sys
import traceback

from market_loader import load_market
from validation import is_valid_amount, has_sufficient_offers
from loan_quote import build_quote
from quote_formatter import print_formatted_quote
from common_utils import setup_logging, ConfigurationError, DataError, QuoteError
from constants import MESSAGES, PATHS

# Set up logger
logger = None


class QuoteArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises on invalid arguments instead of exiting."""

    def error(self, message):
        raise ConfigurationError(message)


def parse_arguments(argv=None):
    """Parse command-line arguments."""
    parser = QuoteArgumentParser(description='Loan Quote Calculator')

    parser.add_argument('market_file',
                        help='Path to the lender market CSV file')
    parser.add_argument('loan_amount',
                        help='Requested loan amount (1000 to 15000 in increments of 100)')
    parser.add_argument('--verbose', action='store_true',
                        help='Display verbose output')
    parser.add_argument('--log-file',
                        help=f"Also write the log to this file under '{PATHS['DEFAULT_LOG_DIR']}/'")

    # Extra arguments after the market file and amount are ignored
    args, _ = parser.parse_known_args(argv)
    return args


def run_quote(args):
    """
    Load the market and print a quote for the requested amount.

    Args:
        args: Parsed command-line arguments

    Returns:
        Quote instance, or None if no quote can be offered
    """
    market = load_market(args.market_file, verbose=args.verbose)

    if not is_valid_amount(args.loan_amount):
        logger.debug(f"Requested amount is not valid: {args.loan_amount}")
        print(MESSAGES['NO_QUOTE'])
        return None

    if not has_sufficient_offers(market, args.loan_amount):
        logger.debug(f"Market can't fund requested amount: {args.loan_amount}")
        print(MESSAGES['NO_QUOTE'])
        return None

    quote = build_quote(market, args.loan_amount, verbose=args.verbose)
    logger.debug(f"Quoted {quote!r}")
    print_formatted_quote(quote)
    return quote


def main(argv=None):
    """Main entry point."""
    global logger
    logger = setup_logging(__name__)

    try:
        args = parse_arguments(argv)
    except ConfigurationError as e:
        print(MESSAGES['INVALID_ARGUMENTS'])
        logger.error(f"Configuration error: {str(e)}")
        return 2

    if args.log_file:
        logger = setup_logging(__name__, log_to_file=True,
                               log_dir=PATHS['DEFAULT_LOG_DIR'], log_file=args.log_file)

    # Configure log level based on verbose flag
    log_level = logging.DEBUG if args.verbose else logging.INFO
    for handler in logger.handlers:
        handler.setLevel(log_level)
    logger.setLevel(log_level)

    try:
        run_quote(args)
        return 0

    except DataError as e:
        logger.error(f"Data error: {str(e)}")
        return 3

    except QuoteError as e:
        logger.error(f"Quote error: {str(e)}")
        return 4

    except KeyboardInterrupt:
        logger.info("Process interrupted by user")
        return 130

    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}")
        logger.debug(traceback.format_exc())
        return 99


if __name__ == "__main__":
    sys.exit(main())
