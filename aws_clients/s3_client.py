#!/usr/bin/env python3
"""
S3 Client Module

Checks for the existence of the AGC bucket. Creation is left to the CDK app.
"""

import boto3  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore
from errors import StorageAccessError
from logger.log_wrapper import get_logger

logger = get_logger("aws:s3", __name__)

BUCKET_NOT_FOUND_CODES = {'404', 'NoSuchBucket', 'NotFound'}


class S3Client:
    """S3 bucket queries."""

    def __init__(self, session: boto3.Session, region: str):
        self.client = session.client('s3', region_name=region)
    
    def bucket_exists(self, bucket_name: str) -> bool:
        """
        Check if an S3 bucket exists.
        
        Args:
            bucket_name: Name of the bucket to check
            
        Returns:
            bool: True if the bucket exists, False if it does not
            
        Raises:
            StorageAccessError: If S3 cannot be queried (including access denied)
        """
        try:
            self.client.head_bucket(Bucket=bucket_name)
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            if error_code in BUCKET_NOT_FOUND_CODES:
                logger.debug(f"Bucket {bucket_name} does not exist")
                return False
            raise StorageAccessError(f"unable to check bucket '{bucket_name}': {e}") from e
        except BotoCoreError as e:
            raise StorageAccessError(f"unable to check bucket '{bucket_name}': {e}") from e
        
        logger.debug(f"Bucket {bucket_name} exists")
        return True
