#!/usr/bin/env python3
"""
Home directory resolution for AGC's local files.
"""

import os
from errors import ConfigurationError
from configuration import HOME_DIR_ENV_VAR


def determine_home_dir() -> str:
    """
    Determine the directory holding AGC's '.agc' folder.
    
    Returns:
        str: AGC_HOME if set, otherwise the user's home directory
        
    Raises:
        ConfigurationError: If no home directory can be determined
    """
    home_dir = os.getenv(HOME_DIR_ENV_VAR)
    if home_dir:
        return home_dir
    
    home_dir = os.path.expanduser("~")
    if not home_dir or home_dir == "~":
        raise ConfigurationError(f"unable to determine home directory, set {HOME_DIR_ENV_VAR}")
    return home_dir
