#!/usr/bin/env python3
"""
Offer Allocator for the Loan Quote Calculator

This module fills a requested loan from the cheapest lenders first and
computes the resulting amount-weighted (blended) interest rate.
"""

from collections import namedtuple
from decimal import Decimal, localcontext, ROUND_FLOOR

from common_utils import setup_logging, QuoteError, InsufficientOffersError
from constants import PRECISION

# Set up logger
logger = setup_logging(__name__)

# Portion of the loan funded at a single rate
Tranche = namedtuple('Tranche', ['rate', 'amount'])


def allocate_offers(market, loan_amount, verbose=False):
    """
    Allocate the loan across the market, cheapest rate first.

    Each rate is consumed up to its full capacity until the requested amount
    is covered; the last rate used only contributes what is still remaining.

    Args:
        market: Mapping of Decimal rate to Decimal available amount
        loan_amount: Requested loan amount
        verbose: Whether to log the allocation

    Returns:
        List of Tranche(rate, amount) in ascending rate order

    Raises:
        QuoteError: If the loan amount is not positive
        InsufficientOffersError: If the market can't fund the whole loan
    """
    loan_amount = Decimal(loan_amount)
    if loan_amount <= 0:
        raise QuoteError(f"Loan amount must be positive, got {loan_amount}")

    tranches = []
    remaining = loan_amount
    for rate in sorted(market):
        available = market[rate]
        if available <= 0:
            continue

        if available >= remaining:
            # This lender covers the rest of the loan
            tranches.append(Tranche(rate, remaining))
            remaining = Decimal('0')
            break

        tranches.append(Tranche(rate, available))
        remaining -= available

    if remaining > 0:
        raise InsufficientOffersError(loan_amount, loan_amount - remaining)

    if verbose:
        logger.info(f"Allocated {loan_amount} across {len(tranches)} rates:")
        for tranche in tranches:
            logger.info(f"  {tranche.amount} at {tranche.rate}")

    return tranches


def get_minimum_average_interest(market, loan_amount, verbose=False):
    """
    Return the minimum blended interest rate the market can offer for a loan.

    A loan of 1000 against a market offering 480 at 0.069 and 580 at 0.071
    takes all 480 from the first rate and 520 from the second, giving
    (33.120 + 36.920) / 1000 = 0.070.

    Args:
        market: Mapping of Decimal rate to Decimal available amount
        loan_amount: Requested loan amount
        verbose: Whether to log the allocation

    Returns:
        Blended rate as a Decimal, floored at the scale of the weighted interest

    Raises:
        QuoteError: If the loan amount is not positive
        InsufficientOffersError: If the market can't fund the whole loan
    """
    loan_amount = Decimal(loan_amount)
    tranches = allocate_offers(market, loan_amount, verbose=verbose)
    return blended_rate(tranches, loan_amount)


def blended_rate(tranches, loan_amount):
    """
    Amount-weighted average rate of the tranches over the loan amount.

    Args:
        tranches: Iterable of Tranche(rate, amount)
        loan_amount: Total loan amount the tranches fund

    Returns:
        Decimal rate, floored at the scale of the accumulated weighted interest
    """
    with localcontext() as ctx:
        ctx.prec = PRECISION['WORKING_DIGITS']
        ctx.rounding = ROUND_FLOOR

        weighted_interest = PRECISION['INTEREST_ACCUMULATOR']
        for tranche in tranches:
            weighted_interest += tranche.rate * tranche.amount

        scale = Decimal(1).scaleb(weighted_interest.as_tuple().exponent)
        return (weighted_interest / Decimal(loan_amount)).quantize(scale, rounding=ROUND_FLOOR)
