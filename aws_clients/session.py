#!/usr/bin/env python3
"""
AWS Session Module

Creates the boto3 session shared by all AWS clients for a command invocation.
"""

import os
from typing import Optional
import boto3  # type: ignore
from botocore.exceptions import ProfileNotFound  # type: ignore
from errors import ConfigurationError
from configuration import DEFAULT_AWS_REGION
from logger.log_wrapper import get_logger

logger = get_logger("aws:session", __name__)


def create_aws_session(profile: Optional[str] = None) -> boto3.Session:
    """
    Create AWS session for the given named profile.
    
    Args:
        profile: AWS named profile, or None for the default credential chain
        
    Returns:
        boto3.Session: Configured AWS session
        
    Raises:
        ConfigurationError: If the named profile does not exist
    """
    if not profile:
        logger.debug("Using default AWS session")
        return boto3.Session()
    
    try:
        logger.debug(f"Using AWS profile: {profile}")
        return boto3.Session(profile_name=profile)
    except ProfileNotFound as e:
        raise ConfigurationError(f"AWS profile '{profile}' not found") from e


def resolve_region(session: boto3.Session) -> str:
    """
    Resolve the AWS region for a session.
    
    Falls back to AWS_DEFAULT_REGION, then AWS_REGION, then us-east-1.
    """
    region = session.region_name or os.getenv('AWS_DEFAULT_REGION') or os.getenv('AWS_REGION')
    if not region:
        logger.warning(f"No AWS region configured, defaulting to {DEFAULT_AWS_REGION}")
        region = DEFAULT_AWS_REGION
    return region
