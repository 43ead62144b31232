#!/usr/bin/env python3
"""
Loan Quote for the Loan Quote Calculator

This module ties the allocator and the repayment calculator together into a
single quote for a requested amount.
"""

from decimal import Decimal

from common_utils import setup_logging
from offer_allocator import allocate_offers, blended_rate
from repayment_calculator import calculate_monthly_repayment, calculate_total_repayment
from quote_formatter import format_quote

# Set up logger
logger = setup_logging(__name__)


class Quote:
    """A loan quote computed from the market for a requested amount."""

    def __init__(self, requested_amount, rate, monthly_repayment, total_repayment, tranches=None):
        """
        Initialize a quote.

        Args:
            requested_amount: Requested loan amount
            rate: Blended annual interest rate
            monthly_repayment: Monthly repayment (5 decimals)
            total_repayment: Total repayment over the term (2 decimals)
            tranches: Tranches of the market that fund the loan
        """
        self.requested_amount = requested_amount
        self.rate = rate
        self.monthly_repayment = monthly_repayment
        self.total_repayment = total_repayment
        self.tranches = list(tranches or [])

    def __repr__(self):
        return (f"Quote(requested_amount={self.requested_amount!r}, rate={self.rate!r}, "
                f"monthly_repayment={self.monthly_repayment!r}, total_repayment={self.total_repayment!r})")

    def __str__(self):
        return format_quote(self)


def build_quote(market, loan_amount, verbose=False):
    """
    Calculate the quote for a loan amount.

    The caller is expected to have validated the amount and the market
    capacity first; an unfundable request raises rather than producing a rate.

    Args:
        market: Mapping of Decimal rate to Decimal available amount
        loan_amount: Requested loan amount
        verbose: Whether to log the calculation

    Returns:
        Quote instance

    Raises:
        QuoteError: If the loan amount is not positive
        InsufficientOffersError: If the market can't fund the whole loan
    """
    loan_amount = Decimal(loan_amount)

    tranches = allocate_offers(market, loan_amount, verbose=verbose)
    rate = blended_rate(tranches, loan_amount)
    monthly_repayment = calculate_monthly_repayment(rate, loan_amount)
    total_repayment = calculate_total_repayment(monthly_repayment)

    if verbose:
        logger.info(f"Blended rate: {rate}, monthly repayment: {monthly_repayment}, "
                    f"total repayment: {total_repayment}")

    return Quote(loan_amount, rate, monthly_repayment, total_repayment, tranches)
