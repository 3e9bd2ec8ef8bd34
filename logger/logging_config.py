#!/usr/bin/env python3
"""
Logging Configuration Module

This module provides logging configuration for the AGC command line.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False, log_dir: Optional[str] = None) -> Optional[str]:
    """
    Set up logging for a command invocation.
    
    Args:
        verbose: Log at DEBUG level instead of INFO
        log_dir: Optional directory for a detailed log file
        
    Returns:
        Optional[str]: Path to the log file, if one was requested
    """
    level = logging.DEBUG if verbose else logging.INFO
    
    # Configure basic logging for console output
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True
    )
    
    # Keep botocore's wire logging out of verbose output
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    
    if not log_dir:
        return None
    
    os.makedirs(log_dir, exist_ok=True)
    log_filename = os.path.join(log_dir, "agc.log")
    
    # Create file handler for detailed logging
    file_handler = logging.FileHandler(log_filename)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    
    # Add file handler to root logger
    logging.getLogger().addHandler(file_handler)
    
    return log_filename
