#!/usr/bin/env python3
"""
Repayment Calculator for the Loan Quote Calculator

This module computes the fixed monthly repayment of an amortizing loan:

    Monthly repayment = Principal / Discount Factor
    Discount Factor   = ((1 + i) ^ n - 1) / (i * (1 + i) ^ n)

where i is the annual rate divided by 12 and n is the loan term in months.
Every intermediate step is rounded up to 5 decimals; only the total
repayment is rounded down to whole pence.
"""

from decimal import Decimal, localcontext, ROUND_CEILING, ROUND_FLOOR

from constants import LOAN, PRECISION

TERM_MONTHS = Decimal(LOAN['TERM_MONTHS'])
MONTHS_PER_YEAR = Decimal(LOAN['MONTHS_PER_YEAR'])


def calculate_monthly_rate(rate):
    """Annual rate divided by 12, rounded up to 5 decimals."""
    with localcontext() as ctx:
        ctx.prec = PRECISION['WORKING_DIGITS']
        ctx.rounding = ROUND_CEILING
        return (Decimal(rate) / MONTHS_PER_YEAR).quantize(PRECISION['CALCULATION_STEP'],
                                                          rounding=ROUND_CEILING)


def calculate_discount_factor(monthly_rate):
    """
    Annuity discount factor for the loan term, rounded up to 5 decimals.

    Args:
        monthly_rate: Monthly interest rate as a Decimal

    Returns:
        Decimal discount factor. A zero rate has nothing to discount, so the
        factor is the number of months in the term.
    """
    monthly_rate = Decimal(monthly_rate)
    if monthly_rate == 0:
        return TERM_MONTHS.quantize(PRECISION['CALCULATION_STEP'])

    with localcontext() as ctx:
        ctx.prec = PRECISION['WORKING_DIGITS']
        ctx.rounding = ROUND_CEILING

        compounded = (Decimal(1) + monthly_rate) ** LOAN['TERM_MONTHS']
        numerator = compounded - Decimal(1)
        denominator = monthly_rate * compounded

        return (numerator / denominator).quantize(PRECISION['CALCULATION_STEP'],
                                                  rounding=ROUND_CEILING)


def calculate_monthly_repayment(rate, loan_amount):
    """
    Calculate the fixed monthly repayment for a loan over the fixed term.

    Args:
        rate: Annual interest rate as a Decimal (e.g. Decimal('0.072'))
        loan_amount: Principal as a Decimal

    Returns:
        Monthly repayment as a Decimal rounded up to 5 decimals
    """
    discount_factor = calculate_discount_factor(calculate_monthly_rate(rate))

    with localcontext() as ctx:
        ctx.prec = PRECISION['WORKING_DIGITS']
        ctx.rounding = ROUND_CEILING
        return (Decimal(loan_amount) / discount_factor).quantize(PRECISION['CALCULATION_STEP'],
                                                                 rounding=ROUND_CEILING)


def calculate_total_repayment(monthly_repayment):
    """Total paid over the term, rounded down to 2 decimals."""
    with localcontext() as ctx:
        ctx.prec = PRECISION['WORKING_DIGITS']
        return (Decimal(monthly_repayment) * TERM_MONTHS).quantize(PRECISION['CURRENCY_STEP'],
                                                                   rounding=ROUND_FLOOR)
