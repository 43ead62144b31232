#!/usr/bin/env python3
"""
Constants for the Loan Quote Calculator

This module contains constants used throughout the Loan Quote Calculator.
"""

from decimal import Decimal

# Market file column names
MARKET_COLUMNS = {
    'LENDER': 'Lender',
    'RATE': 'Rate',
    'AVAILABLE': 'Available',
}

# Market file layout
MARKET_FILE = {
    'SEPARATOR': ',',
    'HEADER_MARKER': 'Lender',  # Any line containing this is treated as the header
    'FIELD_COUNT': 3,
}

# Loan product constants
LOAN = {
    'TERM_MONTHS': 36,
    'MONTHS_PER_YEAR': 12,
    'MIN_AMOUNT': 1000,
    'MAX_AMOUNT': 15000,
    'AMOUNT_INCREMENT': 100,
    'CURRENCY_SYMBOL': '£',
}

# Decimal precision and quantization steps
PRECISION = {
    'CALCULATION_STEP': Decimal('0.00001'),  # 5 decimals for rate/discount factor/repayment
    'CURRENCY_STEP': Decimal('0.01'),
    'PERCENT_STEP': Decimal('0.1'),
    'INTEREST_ACCUMULATOR': Decimal('0.00'),
    'WORKING_DIGITS': 250,  # Enough to hold (1 + i) ** 36 exactly
}

# Market data validation
VALIDATION = {
    'RATE_MIN': Decimal('0'),
    'RATE_MAX': Decimal('1'),  # Exclusive
    'AVAILABLE_MIN': Decimal('0'),
}

# Console messages
MESSAGES = {
    'NO_QUOTE': 'Unfortunately we cannot provide a quote at this moment',
    'INVALID_ARGUMENTS': 'ERROR: Invalid arguments',
}

# Default file paths
PATHS = {
    'DEFAULT_LOG_DIR': 'logs',
}
