#!/usr/bin/env python3
"""
Error types raised while activating AGC in an AWS account.

Every AWS collaborator translates its own failures into one of these so the
command layer only has to deal with a single hierarchy.
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from aws_clients.ecr_client import ImageReference


class AgcError(Exception):
    """Base class for all AGC errors."""


class ConfigurationError(AgcError):
    """Local configuration (profile, home directory) could not be resolved."""


class IdentityLookupError(AgcError):
    """The AWS account id could not be retrieved."""


class StorageAccessError(AgcError):
    """S3 could not be queried for a bucket."""


class RegistryVerificationError(AgcError):
    """A required container image could not be verified in ECR."""

    def __init__(self, image_ref: "ImageReference", reason: str):
        self.image_ref = image_ref
        self.reason = reason
        super().__init__(f"unable to verify image {image_ref.uri}: {reason}")


class DeploymentError(AgcError):
    """The CDK deployment failed. Carries the output collected so far."""

    def __init__(self, message: str, outputs: Optional[List[str]] = None):
        super().__init__(message)
        self.outputs = list(outputs or [])
