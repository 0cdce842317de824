"""Pydantic models for spaces storage request/response validation."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class _Args(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class UploadObjectArgs(_Args):
    key: str = Field(min_length=1)
    content: str = Field(min_length=1)
    content_type: str | None = Field(default=None, alias="contentType")


class UploadFileArgs(_Args):
    key: str = Field(min_length=1)
    filepath: str = Field(min_length=1)
    content_type: str | None = Field(default=None, alias="contentType")


class DownloadObjectArgs(_Args):
    key: str = Field(min_length=1)


class DeleteObjectArgs(_Args):
    key: str = Field(min_length=1)


class ListObjectsArgs(_Args):
    prefix: str | None = None
    # Not range-checked here; the listing caps it at one page
    max_keys: int | None = Field(default=None, alias="maxKeys")


class ObjectDescriptor(BaseModel):
    """One entry of a list_objects result."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    size: int = Field(ge=0)
    last_modified: datetime | None = Field(default=None, alias="lastModified")

    @field_serializer("last_modified")
    def serialize_last_modified(self, value: datetime | None) -> str | None:
        # ISO-8601 in UTC with millisecond precision, e.g. 2026-02-15T12:00:00.000Z
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
