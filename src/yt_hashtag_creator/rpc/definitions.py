"""Tool definitions and JSON-RPC constants.

Defines the single tool exposed to RPC peers in MCP tool-list format.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..constants import DEFAULT_MAX_HASHTAGS, ContentStyle, Niche

SERVER_NAME = "YT-Hashtag-Creator"
CAPABILITIES = ["youtube", "hashtags", "trending", "discovery"]

JSONRPC_VERSION = "2.0"

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

CREATE_HASHTAGS_TOOL = "createHashtags"


@dataclass
class RpcError:
    """JSON-RPC error object."""

    code: int
    message: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data:
            error["data"] = self.data
        return error


TOOL_SCHEMAS = [
    {
        "name": CREATE_HASHTAGS_TOOL,
        "description": "Create optimized YouTube hashtags for video discovery",
        "inputSchema": {
            "type": "object",
            "properties": {
                "concept": {
                    "type": "string",
                    "description": "The video concept/topic",
                },
                "title": {
                    "type": "string",
                    "description": "The video title",
                },
                "keywords": {
                    "type": "object",
                    "description": "Keywords data from analyzer",
                },
                "niche": {
                    "type": "string",
                    "enum": [niche.value for niche in Niche],
                    "description": "Content niche",
                },
                "contentStyle": {
                    "type": "string",
                    "enum": [style.value for style in ContentStyle],
                    "description": "Type of content",
                },
                "targetAudience": {
                    "type": "string",
                    "description": "Target audience",
                },
                "maxHashtags": {
                    "type": "number",
                    "default": DEFAULT_MAX_HASHTAGS,
                    "description": "Maximum hashtags to generate (recommended: 3-5)",
                },
                "prioritizeTrending": {
                    "type": "boolean",
                    "default": True,
                    "description": "Prioritize trending hashtags",
                },
            },
            "required": ["concept"],
        },
    },
]


# Tool name to schema mapping for quick lookup
AVAILABLE_TOOLS = {
    schema["name"]: schema
    for schema in TOOL_SCHEMAS
}
