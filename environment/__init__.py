#!/usr/bin/env python3
"""
Environment Package

Build-time environment for AGC, such as the container images it deploys.
"""

from .common_images import (
    COMMON_IMAGES,
    IMAGE_KEYS,
    WES_IMAGE_KEY,
    CROMWELL_IMAGE_KEY,
    NEXTFLOW_IMAGE_KEY,
    load_common_images
)

__all__ = [
    'COMMON_IMAGES',
    'IMAGE_KEYS',
    'WES_IMAGE_KEY',
    'CROMWELL_IMAGE_KEY',
    'NEXTFLOW_IMAGE_KEY',
    'load_common_images'
]
