#!/usr/bin/env python3
"""
Test S3 Client Module
"""

import pytest
from unittest.mock import Mock
from botocore.exceptions import ClientError, EndpointConnectionError
from aws_clients.s3_client import S3Client
from errors import StorageAccessError


def head_bucket_error(code: str) -> ClientError:
    return ClientError({'Error': {'Code': code, 'Message': code}}, 'HeadBucket')


def make_s3_client(mock_boto_client: Mock) -> S3Client:
    session = Mock()
    session.client.return_value = mock_boto_client
    return S3Client(session, "us-east-1")


class TestBucketExists:
    """Test cases for bucket existence checks."""
    
    def test_existing_bucket(self):
        boto_client = Mock()
        boto_client.head_bucket.return_value = {}
        
        assert make_s3_client(boto_client).bucket_exists("my-bucket") is True
        boto_client.head_bucket.assert_called_once_with(Bucket="my-bucket")
    
    @pytest.mark.parametrize("code", ["404", "NoSuchBucket", "NotFound"])
    def test_missing_bucket(self, code):
        """Test that not-found responses mean the bucket does not exist."""
        boto_client = Mock()
        boto_client.head_bucket.side_effect = head_bucket_error(code)
        
        assert make_s3_client(boto_client).bucket_exists("my-bucket") is False
    
    def test_access_denied_raises(self):
        """Test that a forbidden bucket is an error rather than a missing bucket."""
        boto_client = Mock()
        boto_client.head_bucket.side_effect = head_bucket_error("403")
        
        with pytest.raises(StorageAccessError, match="my-bucket"):
            make_s3_client(boto_client).bucket_exists("my-bucket")
    
    def test_transport_failure_raises(self):
        boto_client = Mock()
        boto_client.head_bucket.side_effect = EndpointConnectionError(endpoint_url="https://s3.amazonaws.com")
        
        with pytest.raises(StorageAccessError):
            make_s3_client(boto_client).bucket_exists("my-bucket")
