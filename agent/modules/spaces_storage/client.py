"""DigitalOcean Spaces client.

Wraps the synchronous MinIO SDK with asyncio.to_thread so tool calls only
suspend while the network request is in flight.
"""

from __future__ import annotations

import asyncio
import io
from itertools import islice
from urllib.parse import urlparse

import structlog
from minio import Minio

from modules.spaces_storage.models import ObjectDescriptor
from shared.config import Settings

logger = structlog.get_logger()

# S3 returns at most this many keys per listing page
DEFAULT_MAX_KEYS = 1000

READ_CHUNK_SIZE = 32 * 1024


def parse_endpoint(endpoint: str) -> tuple[str, bool]:
    """Split an endpoint URL into (host[:port], secure).

    A bare host without a scheme is treated as HTTPS.
    """
    if "://" not in endpoint:
        return endpoint.strip("/"), True
    parsed = urlparse(endpoint)
    return parsed.netloc, parsed.scheme == "https"


class SpacesClient:
    """Async facade over a MinIO client bound to one bucket."""

    def __init__(self, minio: Minio, bucket: str):
        self.minio = minio
        self.bucket = bucket

    @classmethod
    def from_settings(cls, settings: Settings) -> SpacesClient:
        host, secure = parse_endpoint(settings.do_spaces_endpoint)
        minio = Minio(
            host,
            access_key=settings.do_spaces_key,
            secret_key=settings.do_spaces_secret,
            region=settings.do_spaces_region,
            secure=secure,
        )
        return cls(minio, settings.do_spaces_bucket)

    async def upload(self, key: str, data: bytes, content_type: str) -> None:
        """Upload ``data`` under ``key``.

        The length is known up front, so MinIO switches to a multipart
        upload on its own for large bodies.
        """
        await asyncio.to_thread(
            self.minio.put_object,
            self.bucket,
            key,
            io.BytesIO(data),
            length=len(data),
            content_type=content_type,
        )
        logger.info("object_uploaded", key=key, size=len(data), content_type=content_type)

    async def get_chunks(self, key: str) -> list[bytes] | None:
        """Fetch ``key`` and return its body as the list of chunks read.

        Returns None if the service sent no body. The whole object is held
        in memory, so object size is bounded by available memory.
        """

        def _get():
            response = self.minio.get_object(self.bucket, key)
            if response is None:
                return None
            try:
                return list(response.stream(READ_CHUNK_SIZE))
            finally:
                response.close()
                response.release_conn()

        chunks = await asyncio.to_thread(_get)
        if chunks is not None:
            logger.info("object_downloaded", key=key, size=sum(len(c) for c in chunks))
        return chunks

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self.minio.remove_object, self.bucket, key)
        logger.info("object_deleted", key=key)

    async def list_page(
        self, prefix: str | None = None, max_keys: int | None = None
    ) -> list[ObjectDescriptor]:
        """Return a single listing page of objects under ``prefix``.

        MinIO's listing is a lazy generator that fetches further pages on
        demand; stopping after ``max_keys`` entries keeps this to one page.
        """
        # A listing page never holds more than DEFAULT_MAX_KEYS entries
        limit = DEFAULT_MAX_KEYS if max_keys is None else min(max_keys, DEFAULT_MAX_KEYS)

        def _list():
            objects = self.minio.list_objects(self.bucket, prefix=prefix, recursive=True)
            return [
                ObjectDescriptor(key=obj.object_name, size=obj.size or 0, last_modified=obj.last_modified)
                for obj in islice(objects, limit)
            ]

        descriptors = await asyncio.to_thread(_list)
        logger.info("objects_listed", prefix=prefix, max_keys=max_keys, count=len(descriptors))
        return descriptors
