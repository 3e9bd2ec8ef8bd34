#!/usr/bin/env python3
"""
Common Images Module

Static table of the container images deployed by the AGC core stack.
Each field can be overridden through AGC_<KEY>_ECR_REGISTRY, AGC_<KEY>_ECR_REGION,
AGC_<KEY>_ECR_TAG and AGC_<KEY>_ECR_REPOSITORY, e.g. AGC_WES_ECR_TAG.
"""

import os
from typing import Dict, Mapping, Optional
from dotenv import load_dotenv
from aws_clients.ecr_client import ImageReference

load_dotenv(override=True)

WES_IMAGE_KEY = "WES"
CROMWELL_IMAGE_KEY = "CROMWELL"
NEXTFLOW_IMAGE_KEY = "NEXTFLOW"

# Order is significant: images are verified and exported in this order
IMAGE_KEYS = [WES_IMAGE_KEY, CROMWELL_IMAGE_KEY, NEXTFLOW_IMAGE_KEY]

DEFAULT_IMAGES = {
    WES_IMAGE_KEY: ImageReference(
        registry_id="555741728588",
        region="us-east-1",
        image_tag="0.1.0",
        repository_name="aws/agc-wes-adapter"
    ),
    CROMWELL_IMAGE_KEY: ImageReference(
        registry_id="555741728588",
        region="us-east-1",
        image_tag="64",
        repository_name="aws/cromwell-mirror"
    ),
    NEXTFLOW_IMAGE_KEY: ImageReference(
        registry_id="555741728588",
        region="us-east-1",
        image_tag="21.04.3",
        repository_name="aws/nextflow-mirror"
    ),
}


def load_common_images(environ: Optional[Mapping[str, str]] = None) -> Dict[str, ImageReference]:
    """
    Build the image table, applying any environment overrides.
    
    Args:
        environ: Environment to read overrides from, defaults to os.environ
        
    Returns:
        Dict[str, ImageReference]: Images keyed by logical name, in IMAGE_KEYS order
    """
    environ = os.environ if environ is None else environ
    images = {}
    for key in IMAGE_KEYS:
        default = DEFAULT_IMAGES[key]
        images[key] = ImageReference(
            registry_id=environ.get(f"AGC_{key}_ECR_REGISTRY", default.registry_id),
            region=environ.get(f"AGC_{key}_ECR_REGION", default.region),
            image_tag=environ.get(f"AGC_{key}_ECR_TAG", default.image_tag),
            repository_name=environ.get(f"AGC_{key}_ECR_REPOSITORY", default.repository_name)
        )
    return images


COMMON_IMAGES = load_common_images()
