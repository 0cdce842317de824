"""Test fixtures and mock data for spaces storage module tests."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

from modules.spaces_storage.client import SpacesClient
from modules.spaces_storage.models import ObjectDescriptor

BUCKET = "test-bucket"

LAST_MODIFIED = datetime(2026, 2, 15, 12, 0, tzinfo=timezone.utc)


def make_minio_object(name: str, size: int = 10) -> MagicMock:
    """Mimic an entry yielded by ``Minio.list_objects``."""
    obj = MagicMock()
    obj.object_name = name
    obj.size = size
    obj.last_modified = LAST_MODIFIED
    return obj


MINIO_OBJECTS = [make_minio_object(f"x/obj{i}.txt", size=i * 10) for i in range(5)]


def make_descriptors(count: int) -> list[ObjectDescriptor]:
    return [
        ObjectDescriptor(key=f"x/obj{i}.txt", size=i * 10, last_modified=LAST_MODIFIED)
        for i in range(count)
    ]


def make_mock_client() -> MagicMock:
    """Storage client double; every method is an AsyncMock recording its calls."""
    client = MagicMock(spec=SpacesClient)
    client.bucket = BUCKET
    client.upload = AsyncMock(return_value=None)
    client.get_chunks = AsyncMock(return_value=[])
    client.delete = AsyncMock(return_value=None)
    client.list_page = AsyncMock(return_value=[])
    return client


def make_get_object_response(chunks: list[bytes]) -> MagicMock:
    """Mimic the urllib3 response returned by ``Minio.get_object``."""
    response = MagicMock()
    response.stream.return_value = iter(chunks)
    return response
