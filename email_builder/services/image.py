import logging
import mimetypes
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from email_builder.core.exceptions import NoFileProvided, UploadFailed
from email_builder.services.storage import LocalStorage

logger = logging.getLogger(__name__)

@lru_cache()
def _r2_client(account_id: str, access_key_id: str, secret_access_key: str):
    return boto3.client(
        "s3",
        endpoint_url=f"https://{account_id}.r2.cloudflarestorage.com",
        aws_access_key_id=access_key_id,
        aws_secret_access_key=secret_access_key,
        config=Config(signature_version="s3v4"),
    )

def get_r2_client(settings):
    """Create and return an R2 client, reused for identical credentials."""
    return _r2_client(
        settings.R2_ACCOUNT_ID,
        settings.R2_ACCESS_KEY_ID,
        settings.R2_SECRET_ACCESS_KEY,
    )

@dataclass(frozen=True)
class UploadResult:
    url: str
    key: str

class ImageRelay:
    """Forwards uploaded images to the hosted object store.

    Every upload is staged as a local file first; that file is removed once
    the remote call returns, whatever its outcome. Failures are not retried.
    The S3 client is only built once a non-empty payload arrives.
    """
    def __init__(
        self,
        client_factory: Callable[[], Any],
        bucket: str,
        public_url: str,
        storage: LocalStorage,
        folder: str = "email_templates"
    ):
        self.client_factory = client_factory
        self.bucket = bucket
        self.public_url = public_url.rstrip("/")
        self.storage = storage
        self.folder = folder.strip("/")

    def upload(self, file_bytes: bytes, file_name: str) -> UploadResult:
        """Uploads one image and returns its public URL.

        Args:
            file_bytes: Raw file content.
            file_name: Original client-side filename.

        Raises:
            NoFileProvided: If the payload is empty. Nothing is staged or sent.
            UploadFailed: If the client cannot be built or the object store call fails.
        """
        if not file_bytes:
            raise NoFileProvided("No file uploaded")

        try:
            client = self.client_factory()
        except (BotoCoreError, ValueError) as e:
            # Misconfigured endpoint or credentials
            logger.error(f"Could not create image storage client: {e}")
            raise UploadFailed("Image storage is not configured") from e

        staged = self.storage.stage(file_name, file_bytes)
        key = f"{self.folder}/{staged.name}" if self.folder else staged.name
        content_type = mimetypes.guess_type(file_name or "")[0] or "application/octet-stream"
        try:
            with open(staged, "rb") as body:
                client.put_object(
                    Bucket=self.bucket,
                    Key=key,
                    Body=body,
                    ContentType=content_type,
                )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Image upload error for {file_name}: {e}")
            raise UploadFailed(f"Error uploading {os.path.basename(file_name or '')}") from e
        finally:
            self.storage.discard(staged)

        url = f"{self.public_url}/{key}"
        logger.info(f"Uploaded image {file_name} to {url}")
        return UploadResult(url=url, key=key)
