"""Spaces storage module manifest — tool definitions."""

from shared.schemas.tools import ModuleManifest, ToolDefinition, ToolParameter

_KEY = ToolParameter(name="key", type="string", description="Object key (path) in the bucket")

MANIFEST = ModuleManifest(
    module_name="spaces_storage",
    description="Upload, download, list and delete objects in a DigitalOcean Spaces bucket.",
    tools=[
        ToolDefinition(
            name="upload_object",
            description="Upload a file or data to DO Spaces",
            parameters=[
                _KEY,
                ToolParameter(name="content", type="string", description="Content to upload"),
                ToolParameter(
                    name="contentType",
                    type="string",
                    description="MIME type of the content",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="upload_file",
            description="Upload a file from disk to DO Spaces",
            parameters=[
                _KEY,
                ToolParameter(name="filepath", type="string", description="Local file path to upload"),
                ToolParameter(
                    name="contentType",
                    type="string",
                    description="Optional MIME type override",
                    required=False,
                ),
            ],
        ),
        ToolDefinition(
            name="download_object",
            description="Download an object from DO Spaces",
            parameters=[_KEY],
        ),
        ToolDefinition(
            name="delete_object",
            description="Delete an object from DO Spaces",
            parameters=[_KEY],
        ),
        ToolDefinition(
            name="list_objects",
            description="List objects in DO Spaces bucket",
            parameters=[
                ToolParameter(
                    name="prefix",
                    type="string",
                    description="Prefix to filter objects by",
                    required=False,
                ),
                ToolParameter(
                    name="maxKeys",
                    type="integer",
                    description="Maximum number of keys to return",
                    required=False,
                ),
            ],
        ),
    ],
)
