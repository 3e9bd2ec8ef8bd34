#!/usr/bin/env python3
"""
AWS Clients Package

Thin wrappers around the AWS services used to activate AGC:
- StsClient: account identity lookup
- S3Client: bucket existence checks
- EcrClient: container image verification
- CdkClient: CDK app deployment with progress streaming
"""

from .session import create_aws_session, resolve_region
from .sts_client import StsClient
from .s3_client import S3Client
from .ecr_client import EcrClient, ImageReference
from .cdk_client import CdkClient, ProgressEvent, ProgressStream

__all__ = [
    'create_aws_session',
    'resolve_region',
    'StsClient',
    'S3Client',
    'EcrClient',
    'ImageReference',
    'CdkClient',
    'ProgressEvent',
    'ProgressStream'
]
