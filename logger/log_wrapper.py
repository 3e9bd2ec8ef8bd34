#!/usr/bin/env python3
"""
Logging Wrapper Module

Provides consistent logging with prefixes for different components.
"""

import logging
from typing import Optional


class PrefixedLogger:
    """Logger wrapper that adds consistent prefixes to all log messages."""
    
    def __init__(self, prefix: str, logger_name: Optional[str] = None):
        self.prefix = prefix
        self.logger = logging.getLogger(logger_name or __name__)
    
    def _format(self, message: str) -> str:
        return f"[{self.prefix}] {message}"
    
    def info(self, message: str) -> None:
        """Log info message."""
        self.logger.info(self._format(message))
    
    def debug(self, message: str) -> None:
        """Log debug message."""
        self.logger.debug(self._format(message))
    
    def warning(self, message: str) -> None:
        """Log warning message."""
        self.logger.warning(self._format(f"⚠️ {message}"))
    
    def error(self, message: str) -> None:
        """Log error message."""
        self.logger.error(self._format(f"❌ {message}"))
    

def get_logger(component: str, logger_name: Optional[str] = None) -> PrefixedLogger:
    """
    Get a prefixed logger for a specific component.
    
    Args:
        component: Short name for the component (e.g., 'cli:account', 'aws:s3', 'aws:cdk')
        logger_name: Optional logger name, defaults to calling module
    
    Returns:
        PrefixedLogger instance
    """
    return PrefixedLogger(component, logger_name)
