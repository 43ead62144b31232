#!/usr/bin/env python3
"""
Market Loader for the Loan Quote Calculator

This module handles loading the lender market file and aggregating the
available amounts by interest rate.
"""

import os
from decimal import Decimal, InvalidOperation
from types import MappingProxyType

import pandas as pd

from common_utils import setup_logging, DataError
from constants import MARKET_COLUMNS, MARKET_FILE, VALIDATION

# Set up logger
logger = setup_logging(__name__)

_COLUMN_ORDER = [MARKET_COLUMNS['LENDER'], MARKET_COLUMNS['RATE'], MARKET_COLUMNS['AVAILABLE']]


def resolve_market_path(market_file, base_dir=None):
    """
    Resolve the market file path.

    Args:
        market_file: Absolute path, or path relative to base_dir
        base_dir: Directory relative paths are resolved against (defaults to the current working directory)

    Returns:
        Absolute path to the market file
    """
    if os.path.isabs(market_file):
        return market_file
    return os.path.join(base_dir or os.getcwd(), market_file)


def load_market(market_file, base_dir=None, verbose=False):
    """
    Load the market file and aggregate the available amounts by rate.

    Lines containing the lender header marker are skipped wherever they
    appear. Rows offering the same rate are merged into a single entry.

    Args:
        market_file: Path to the market CSV file (lender,rate,available)
        base_dir: Directory relative paths are resolved against
        verbose: Whether to log information about the loaded market

    Returns:
        Read-only mapping of Decimal rate to Decimal total available amount.
        The mapping is empty if the file cannot be read or is malformed.
    """
    path = resolve_market_path(market_file, base_dir)

    if verbose:
        logger.info(f"Loading market from file: {path}")

    try:
        offers = _read_offers(path)
        market = _aggregate_offers(offers)
    except (OSError, DataError) as e:
        logger.error(f"Error loading market: {str(e)}")
        return MappingProxyType({})

    if verbose:
        logger.info(f"Loaded {len(offers)} lender offers at {len(market)} distinct rates")
        logger.info(f"Total market capacity: {market_capacity(market)}")

    return MappingProxyType(market)


def market_capacity(market):
    """Return the total amount available across the market."""
    return sum(market.values(), Decimal('0'))


def _read_offers(path):
    """
    Read the raw offer rows from the market file, dropping the header.

    Args:
        path: Path to the market CSV file

    Returns:
        DataFrame with lender, rate and available columns, all as strings

    Raises:
        DataError: If the file is empty or the rows don't have the expected fields
        OSError: If the file can't be opened
    """
    try:
        raw = pd.read_csv(
            path,
            sep=MARKET_FILE['SEPARATOR'],
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError as e:
        raise DataError(f"Market file is empty: {path}") from e
    except pd.errors.ParserError as e:
        raise DataError(f"Malformed market file: {str(e)}") from e
    except UnicodeDecodeError as e:
        raise DataError(f"Market file is not valid UTF-8 text: {str(e)}") from e

    if raw.shape[1] != MARKET_FILE['FIELD_COUNT']:
        raise DataError(
            f"Expected {MARKET_FILE['FIELD_COUNT']} fields per line, found {raw.shape[1]}"
        )

    raw.columns = _COLUMN_ORDER

    header_mask = raw.apply(
        lambda column: column.str.contains(MARKET_FILE['HEADER_MARKER'], regex=False, na=False)
    ).any(axis=1)

    return raw[~header_mask].reset_index(drop=True)


def _aggregate_offers(offers):
    """
    Sum available amounts of offers sharing the same rate.

    Args:
        offers: DataFrame of raw offer rows

    Returns:
        Dict of Decimal rate to Decimal total available amount

    Raises:
        DataError: If any row has an invalid rate or amount
    """
    market = {}
    for row in offers.itertuples(index=False):
        lender, rate_text, available_text = row
        rate = _parse_decimal(rate_text, MARKET_COLUMNS['RATE'], lender)
        available = _parse_decimal(available_text, MARKET_COLUMNS['AVAILABLE'], lender)

        if not VALIDATION['RATE_MIN'] <= rate < VALIDATION['RATE_MAX']:
            raise DataError(f"Rate {rate} for lender '{lender}' is outside [0, 1)")
        if available < VALIDATION['AVAILABLE_MIN']:
            raise DataError(f"Negative amount {available} available from lender '{lender}'")

        if rate in market:
            available = available + market[rate]
        market[rate] = available

    return market


def _parse_decimal(value, column, lender):
    """Parse a market field as a finite Decimal."""
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation as e:
        raise DataError(f"Invalid {column} '{value}' for lender '{lender}'") from e

    if not number.is_finite():
        raise DataError(f"Invalid {column} '{value}' for lender '{lender}'")
    return number
