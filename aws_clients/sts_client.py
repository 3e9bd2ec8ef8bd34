#!/usr/bin/env python3
"""
STS Client Module

Resolves the identity of the AWS account the caller's credentials belong to.
"""

import boto3  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore
from errors import IdentityLookupError
from logger.log_wrapper import get_logger

logger = get_logger("aws:sts", __name__)


class StsClient:
    """Account identity lookups backed by STS."""

    def __init__(self, session: boto3.Session, region: str):
        self.client = session.client('sts', region_name=region)
    
    def get_account(self) -> str:
        """
        Get the id of the AWS account for the current credentials.
        
        Returns:
            str: 12 digit AWS account id
            
        Raises:
            IdentityLookupError: If the caller identity cannot be retrieved
        """
        try:
            identity = self.client.get_caller_identity()
        except (ClientError, BotoCoreError) as e:
            raise IdentityLookupError(f"unable to retrieve AWS caller identity: {e}") from e
        
        account_id = identity.get('Account')
        if not account_id:
            raise IdentityLookupError("AWS caller identity did not include an account id")
        
        logger.debug(f"Resolved AWS account: {account_id}")
        return account_id
