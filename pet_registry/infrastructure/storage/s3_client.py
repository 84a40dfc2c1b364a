"""
S3 Client Factory.

Creates the boto3 S3 client for the DI container. Static credentials are used
when both keys are configured, otherwise boto3's default credential chain
(env, profile, instance role) applies.
"""

import logging

import boto3
from botocore.config import Config as BotoConfig

from pet_registry.config.settings import Config

logger = logging.getLogger(__name__)


def create_s3_client():
    """
    Create an S3 client from settings.

    Note:
        - Signature v4 is required for presigned PUT URLs in most regions
        - S3_ENDPOINT_URL points the client at an S3-compatible store (MinIO, LocalStack)
    """
    kwargs = {
        "region_name": Config.AWS_REGION,
        "config": BotoConfig(signature_version="s3v4"),
    }
    if Config.AWS_ACCESS_KEY_ID and Config.AWS_SECRET_ACCESS_KEY:
        kwargs["aws_access_key_id"] = Config.AWS_ACCESS_KEY_ID
        kwargs["aws_secret_access_key"] = Config.AWS_SECRET_ACCESS_KEY
    if Config.S3_ENDPOINT_URL:
        kwargs["endpoint_url"] = Config.S3_ENDPOINT_URL

    client = boto3.client("s3", **kwargs)
    logger.info(
        f"[S3] Client created for region {Config.AWS_REGION}, bucket {Config.S3_BUCKET_NAME}"
    )
    return client
