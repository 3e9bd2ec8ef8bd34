#!/usr/bin/env python3
"""
CLI Package

Commands of the AGC command line.
"""

from .account_activate import build_account_activate_command
from .cli_error import CliError

__all__ = [
    'build_account_activate_command',
    'CliError'
]
