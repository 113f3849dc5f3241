import logging
import time
from datetime import timedelta

from minio import Minio

from ..core.config import settings
from ..utils.exceptions import UpstreamError

logger = logging.getLogger(__name__)

minio_client = Minio(
    endpoint=settings.STORAGE_ENDPOINT,
    access_key=settings.STORAGE_ACCESS_KEY,
    secret_key=settings.STORAGE_SECRET_KEY,
    region=settings.STORAGE_REGION,
    secure=settings.STORAGE_SECURE,
)


class ObjectStorage:
    """
    Gateway to the media bucket.

    Only two operations touch the bucket: signing a time-limited PUT URL so the
    browser can upload directly, and deleting an object by key. Uploaded bytes
    never pass through this service.
    """

    def __init__(
        self,
        client: Minio,
        bucket_name: str,
        public_base_url: str,
        delete_max_attempts: int = 3,
        delete_backoff_seconds: float = 0.5,
    ):
        self.client = client
        self.bucket_name = bucket_name
        self.public_base_url = public_base_url.rstrip("/")
        self.delete_max_attempts = max(1, delete_max_attempts)
        self.delete_backoff_seconds = delete_backoff_seconds

    def generate_presigned_put_url(self, key: str, expires_in: int) -> str:
        """Signs a PUT for `key`. Not retried: the caller simply asks again."""
        try:
            return self.client.presigned_put_object(
                bucket_name=self.bucket_name,
                object_name=key,
                expires=timedelta(seconds=expires_in),
            )
        except Exception as e:
            logger.error(f"Failed to sign upload URL for key '{key}': {e}")
            raise UpstreamError("Failed to generate presigned URL") from e

    def public_url(self, key: str) -> str:
        return f"{self.public_base_url}/{key}"

    def delete_object(self, key: str) -> None:
        """
        Deletes an object, retrying with exponential backoff. Deleting a key
        that is already gone succeeds, so retrying is safe.
        """
        delay = self.delete_backoff_seconds
        for attempt in range(1, self.delete_max_attempts + 1):
            try:
                self.client.remove_object(bucket_name=self.bucket_name, object_name=key)
                logger.info(f"Deleted object '{key}' from bucket '{self.bucket_name}'")
                return
            except Exception as e:
                if attempt == self.delete_max_attempts:
                    logger.error(f"Giving up deleting object '{key}' after {attempt} attempts: {e}")
                    raise UpstreamError("Failed to delete file from storage") from e
                logger.warning(f"Delete of object '{key}' failed (attempt {attempt}/{self.delete_max_attempts}): {e}; retrying in {delay:.2f}s")
                time.sleep(delay)
                delay *= 2

    def ensure_bucket_exists(self) -> None:
        """Creates the media bucket if missing. Called on application startup."""
        if not self.client.bucket_exists(bucket_name=self.bucket_name):
            self.client.make_bucket(bucket_name=self.bucket_name)
            logger.info(f"Created bucket: {self.bucket_name}")
        else:
            logger.info(f"Bucket '{self.bucket_name}' already exists.")


object_storage = ObjectStorage(
    client=minio_client,
    bucket_name=settings.STORAGE_BUCKET,
    public_base_url=settings.STORAGE_PUBLIC_URL,
    delete_max_attempts=settings.STORAGE_DELETE_MAX_ATTEMPTS,
    delete_backoff_seconds=settings.STORAGE_DELETE_BACKOFF_SECONDS,
)

def get_object_storage() -> ObjectStorage:
    """FastAPI dependency to get the object storage gateway."""
    return object_storage
