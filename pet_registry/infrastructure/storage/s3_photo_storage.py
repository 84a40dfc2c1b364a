"""
S3PhotoStorageGateway - Avatar objects in an S3 bucket.

boto3 is blocking, so every network call runs in a worker thread through
asyncio.to_thread. Presigning is local (no request to S3) but still signs
with the configured credentials.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from pet_registry.domain.entities.presigned_upload_url import PresignedUploadUrl
from pet_registry.domain.exceptions import PhotoUploadError
from pet_registry.domain.ports import PhotoStorageGateway
from pet_registry.domain.services.avatar_keys import build_avatar_key, uploaded_photo_key

logger = logging.getLogger(__name__)

MISSING_OBJECT_CODES = {"404", "NoSuchKey", "NotFound"}


class S3PhotoStorageGateway(PhotoStorageGateway):
    def __init__(
        self,
        s3_client,
        bucket_name: str,
        region: str,
        public_base_url: Optional[str] = None,
    ):
        self._s3 = s3_client
        self._bucket = bucket_name
        self._region = region
        self._public_base_url = (public_base_url or "").rstrip("/")

    async def upload_photo(
        self,
        user_id: str,
        pet_id: str,
        file_name: str,
        content_type: str,
        data: bytes,
    ) -> str:
        key = uploaded_photo_key(user_id, pet_id, file_name)
        logger.info(f"[{pet_id}] Uploading photo to s3://{self._bucket}/{key}")

        try:
            await asyncio.to_thread(
                self._s3.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.warning(f"[{pet_id}] Failed to upload photo to S3: {e}")
            raise PhotoUploadError("Failed to upload photo to S3", e) from e

        return self.build_photo_url(key)

    async def generate_presigned_url(
        self,
        user_id: str,
        pet_id: str,
        content_type: str,
        expiration_minutes: int,
    ) -> PresignedUploadUrl:
        key = build_avatar_key(user_id, pet_id, content_type)
        expires_in = expiration_minutes * 60

        try:
            upload_url = await asyncio.to_thread(
                self._s3.generate_presigned_url,
                "put_object",
                Params={
                    "Bucket": self._bucket,
                    "Key": key,
                    "ContentType": content_type,
                },
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            logger.warning(f"[{pet_id}] Failed to presign upload for {key}: {e}")
            raise PhotoUploadError("Failed to generate presigned upload URL", e) from e

        logger.info(f"[{pet_id}] Presigned PUT for s3://{self._bucket}/{key}")
        return PresignedUploadUrl(
            upload_url=upload_url,
            key=key,
            expires_at=datetime.now(timezone.utc) + timedelta(seconds=expires_in),
        )

    async def verify_photo_exists(self, key: str) -> bool:
        """
        HEAD the object.

        Returns:
            False when S3 reports the key missing, True when it exists

        Raises:
            ClientError: For any other S3 failure (permissions, throttling)
        """
        try:
            await asyncio.to_thread(self._s3.head_object, Bucket=self._bucket, Key=key)
            return True
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in MISSING_OBJECT_CODES:
                logger.info(f"[S3] Object not found: {key}")
                return False
            raise

    def build_photo_url(self, key: str) -> str:
        if self._public_base_url:
            return f"{self._public_base_url}/{key}"
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"
