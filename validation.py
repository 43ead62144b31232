#!/usr/bin/env python3
"""
Validation for the Loan Quote Calculator

This module checks that a requested amount can be quoted: the amount must be
within the product limits and the market must be able to fund it.
"""

from decimal import Decimal, InvalidOperation

from constants import LOAN
from market_loader import market_capacity


def is_valid_amount(amount):
    """
    Check that the requested amount is a whole number between the minimum and
    maximum loan amounts (inclusive) in increments of 100.

    Args:
        amount: Requested amount as int, Decimal or string

    Returns:
        bool: True if the amount can be quoted
    """
    value = _to_whole_amount(amount)
    if value is None:
        return False

    return (value % LOAN['AMOUNT_INCREMENT'] == 0
            and LOAN['MIN_AMOUNT'] <= value <= LOAN['MAX_AMOUNT'])


def has_sufficient_offers(market, amount):
    """
    Check that the total available in the market covers the requested amount.

    Args:
        market: Mapping of rate to available amount
        amount: Requested amount as int, Decimal or string

    Returns:
        bool: True if the market capacity is equal to or greater than the amount
    """
    try:
        requested = Decimal(str(amount).strip())
    except InvalidOperation:
        return False

    if not requested.is_finite():
        return False

    return market_capacity(market) >= requested


def _to_whole_amount(amount):
    """Return the amount as an int, or None if it isn't a whole number."""
    if isinstance(amount, bool):
        return None

    if isinstance(amount, int):
        return amount

    if isinstance(amount, Decimal):
        if amount.is_finite() and amount == amount.to_integral_value():
            return int(amount)
        return None

    if isinstance(amount, str):
        text = amount.strip()
        # Signed digits only; int() would also take "1_000"
        if '_' in text:
            return None
        try:
            return int(text)
        except ValueError:
            return None

    return None
