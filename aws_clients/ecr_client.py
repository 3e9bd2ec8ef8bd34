#!/usr/bin/env python3
"""
ECR Client Module

Verifies that the container images AGC deploys are published in ECR.
Images may live in registries outside the caller's region, so a client is
created per image region.
"""

from dataclasses import dataclass
from typing import Dict
import boto3  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore
from errors import RegistryVerificationError
from logger.log_wrapper import get_logger

logger = get_logger("aws:ecr", __name__)


@dataclass(frozen=True)
class ImageReference:
    """
    Location of a container image in ECR.
    
    Attributes:
        registry_id: AWS account id owning the registry
        region: Region of the registry
        image_tag: Tag of the image
        repository_name: Repository holding the image
    """
    registry_id: str
    region: str
    image_tag: str
    repository_name: str
    
    @property
    def uri(self) -> str:
        return f"{self.registry_id}.dkr.ecr.{self.region}.amazonaws.com/{self.repository_name}:{self.image_tag}"


class EcrClient:
    """ECR image verification."""

    def __init__(self, session: boto3.Session):
        self.session = session
        self._clients: Dict[str, object] = {}
    
    def _client_for(self, region: str):
        if region not in self._clients:
            self._clients[region] = self.session.client('ecr', region_name=region)
        return self._clients[region]
    
    def verify_image_exists(self, image_ref: ImageReference) -> None:
        """
        Verify that an image exists in ECR.
        
        Args:
            image_ref: Image to verify
            
        Raises:
            RegistryVerificationError: If the image or its repository is missing,
                or ECR cannot be queried
        """
        logger.debug(f"Verifying ECR image: {image_ref.uri}")
        client = self._client_for(image_ref.region)
        
        try:
            response = client.describe_images(
                registryId=image_ref.registry_id,
                repositoryName=image_ref.repository_name,
                imageIds=[{'imageTag': image_ref.image_tag}]
            )
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', '')
            if error_code == 'ImageNotFoundException':
                raise RegistryVerificationError(image_ref, "image not found") from e
            if error_code == 'RepositoryNotFoundException':
                raise RegistryVerificationError(image_ref, f"repository {image_ref.repository_name} not found") from e
            raise RegistryVerificationError(image_ref, str(e)) from e
        except BotoCoreError as e:
            raise RegistryVerificationError(image_ref, str(e)) from e
        
        if not response.get('imageDetails'):
            raise RegistryVerificationError(image_ref, "image not found")
        
        logger.debug(f"ECR image verified: {image_ref.uri}")
