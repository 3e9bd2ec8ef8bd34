#!/usr/bin/env python3
"""
Logger Package for logging utilities.
"""

from .log_wrapper import get_logger
from .logging_config import setup_logging

__all__ = [
    'get_logger',
    'setup_logging'
]
