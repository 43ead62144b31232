#!/usr/bin/env python3
"""
Common utilities for the Loan Quote Calculator.

This module provides common functionality like logging setup and custom exceptions.
"""

import logging
import os
from datetime import datetime


def setup_logging(name, level=logging.INFO, log_to_file=False, log_dir='logs', log_file=None):
    """
    Set up logging for a module.

    Args:
        name: Name of the logger (typically __name__)
        level: Logging level
        log_to_file: Whether to log to a file in addition to console
        log_dir: Directory for log files if log_to_file is True
        log_file: Specific log filename to use (if None, generates one based on name and timestamp)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # Only add the console handler if it doesn't exist yet
    if not logger.handlers:
        # Console output goes to stderr so stdout only carries the quote
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_to_file:
        # Relative log directories live under the current working directory
        if not os.path.isabs(log_dir):
            log_dir = os.path.join(os.getcwd(), log_dir)

        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        if log_file:
            log_path = os.path.join(log_dir, log_file)
        else:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            log_path = os.path.join(log_dir, f'{name}_{timestamp}.log')

        # A logger writes to each log file once
        log_path = os.path.abspath(log_path)
        if not any(getattr(handler, 'baseFilename', None) == log_path for handler in logger.handlers):
            file_handler = logging.FileHandler(log_path)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


class LoanQuoteError(Exception):
    """Base exception for all Loan Quote Calculator errors."""
    pass


class DataError(LoanQuoteError):
    """Exception raised for errors in the market data."""
    pass


class ConfigurationError(LoanQuoteError):
    """Exception raised for invalid command-line arguments."""
    pass


class QuoteError(LoanQuoteError):
    """Exception raised when a quote cannot be calculated."""
    pass


class InsufficientOffersError(QuoteError):
    """Exception raised when the market cannot fund the requested amount."""

    def __init__(self, requested, available):
        self.requested = requested
        self.available = available
        super().__init__(f"Market can fund {available}, requested {requested}")
