"""Spaces storage tool implementations."""

from __future__ import annotations

import asyncio
import json
import mimetypes
from pathlib import Path

import structlog
from pydantic import BaseModel, ValidationError

from modules.spaces_storage.client import SpacesClient
from modules.spaces_storage.manifest import MANIFEST
from modules.spaces_storage.models import (
    DeleteObjectArgs,
    DownloadObjectArgs,
    ListObjectsArgs,
    UploadFileArgs,
    UploadObjectArgs,
)
from shared.schemas.tools import ErrorKind, ToolCall, ToolDefinition, ToolResult

logger = structlog.get_logger()

DEFAULT_CONTENT_TYPE = "application/octet-stream"

_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


class ToolError(Exception):
    """A tool failure carrying the kind reported back to the caller."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


def guess_content_type(filepath: str) -> str:
    """Infer a MIME type from the file extension, falling back to binary."""
    mime_type, _ = mimetypes.guess_type(filepath)
    return mime_type or DEFAULT_CONTENT_TYPE


def _parse_args(model: type[BaseModel], arguments: dict) -> BaseModel:
    """Validate raw arguments into ``model``, raising InvalidParams on failure.

    Null and empty-string values count as missing.
    """
    provided = {k: v for k, v in arguments.items() if v is not None}
    try:
        return model.model_validate(provided)
    except ValidationError as e:
        errors = e.errors()
        if all(err["type"] in _MISSING_ERROR_TYPES for err in errors):
            required = [
                field.alias or name
                for name, field in model.model_fields.items()
                if field.is_required()
            ]
            noun = "parameters" if len(required) > 1 else "parameter"
            message = f"Missing required {noun}: {' and '.join(required)}"
        else:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in errors
            )
            message = f"Invalid parameters: {details}"
        raise ToolError(ErrorKind.INVALID_PARAMS, message) from e


class StorageTools:
    """Tool implementations for a single DigitalOcean Spaces bucket.

    Each tool issues exactly one request against the bucket. Nothing is
    retried and nothing is paginated.
    """

    def __init__(self, client: SpacesClient):
        self.client = client
        self._handlers = {
            "upload_object": (UploadObjectArgs, self.upload_object),
            "upload_file": (UploadFileArgs, self.upload_file),
            "download_object": (DownloadObjectArgs, self.download_object),
            "delete_object": (DeleteObjectArgs, self.delete_object),
            "list_objects": (ListObjectsArgs, self.list_objects),
        }

    @staticmethod
    def list_tools() -> list[ToolDefinition]:
        """Return the static tool catalog."""
        return MANIFEST.tools

    async def execute(self, call: ToolCall) -> ToolResult:
        """Validate and run a tool call, returning the outcome by value."""
        logger.info("tool_called", tool=call.tool_name)
        try:
            entry = self._handlers.get(call.tool_name)
            if entry is None:
                raise ToolError(ErrorKind.METHOD_NOT_FOUND, f"Unknown tool: {call.tool_name}")
            model, handler = entry
            args = _parse_args(model, call.arguments or {})
            text = await handler(args)
        except ToolError as e:
            logger.error("tool_execution_error", tool=call.tool_name, kind=e.kind.value, error=e.message)
            return ToolResult(tool_name=call.tool_name, success=False, error=e.message, error_kind=e.kind)
        return ToolResult(tool_name=call.tool_name, success=True, result=text)

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    async def upload_object(self, args: UploadObjectArgs) -> str:
        """Upload inline text content."""
        try:
            await self.client.upload(
                args.key,
                args.content.encode("utf-8"),
                args.content_type or DEFAULT_CONTENT_TYPE,
            )
        except Exception as e:
            raise ToolError(ErrorKind.INTERNAL_ERROR, f"Upload failed: {e}") from e
        return f"Successfully uploaded object: {args.key}"

    async def upload_file(self, args: UploadFileArgs) -> str:
        """Upload a local file, read fully into memory first."""
        try:
            data = await asyncio.to_thread(Path(args.filepath).read_bytes)
            content_type = args.content_type or guess_content_type(args.filepath)
            await self.client.upload(args.key, data, content_type)
        except Exception as e:
            raise ToolError(ErrorKind.INTERNAL_ERROR, f"Upload failed: {e}") from e
        return f"Successfully uploaded file: {args.key}"

    async def download_object(self, args: DownloadObjectArgs) -> str:
        try:
            chunks = await self.client.get_chunks(args.key)
            if chunks is None:
                raise RuntimeError("No content in response")
        except Exception as e:
            raise ToolError(ErrorKind.INTERNAL_ERROR, f"Download failed: {e}") from e
        # Invalid UTF-8 sequences become U+FFFD rather than failing the call
        return b"".join(chunks).decode("utf-8", errors="replace")

    async def delete_object(self, args: DeleteObjectArgs) -> str:
        try:
            await self.client.delete(args.key)
        except Exception as e:
            raise ToolError(ErrorKind.INTERNAL_ERROR, f"Delete failed: {e}") from e
        return f"Successfully deleted object: {args.key}"

    async def list_objects(self, args: ListObjectsArgs) -> str:
        """List one page of objects as a pretty-printed JSON array."""
        try:
            objects = await self.client.list_page(prefix=args.prefix, max_keys=args.max_keys)
        except Exception as e:
            raise ToolError(ErrorKind.INTERNAL_ERROR, f"List failed: {e}") from e
        return json.dumps(
            [obj.model_dump(mode="json", by_alias=True) for obj in objects],
            indent=2,
        )
