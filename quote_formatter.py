#!/usr/bin/env python3
"""
Quote Formatter for the Loan Quote Calculator

Renders a quote as the four lines shown to the borrower.
"""

from decimal import Decimal, ROUND_FLOOR

from constants import LOAN, PRECISION


def format_quote(quote):
    """
    Format a quote for the console.

    Args:
        quote: Quote instance

    Returns:
        Four-line string with requested amount, rate, monthly and total repayment
    """
    currency = LOAN['CURRENCY_SYMBOL']
    lines = [
        f"Requested amount: {currency}{_plain(quote.requested_amount)}",
        f"Rate: {format_rate(quote.rate)}%",
        f"Monthly repayment: {currency}{format_currency(quote.monthly_repayment)}",
        f"Total repayment: {currency}{format_currency(quote.total_repayment)}",
    ]
    return '\n'.join(lines)


def print_formatted_quote(quote):
    """Print the formatted quote to stdout."""
    print(format_quote(quote))


def format_rate(rate):
    """Rate as a percentage rounded down to one decimal, e.g. 0.072 -> '7.2'."""
    percentage = Decimal(rate) * 100
    return _plain(percentage.quantize(PRECISION['PERCENT_STEP'], rounding=ROUND_FLOOR))


def format_currency(amount):
    """Amount rounded down to whole pence, e.g. 61.93725 -> '61.93'."""
    return _plain(Decimal(amount).quantize(PRECISION['CURRENCY_STEP'], rounding=ROUND_FLOOR))


def _plain(value):
    # Fixed-point notation, never scientific
    return format(Decimal(value), 'f')
