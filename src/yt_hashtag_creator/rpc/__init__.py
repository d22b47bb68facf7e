"""JSON-RPC front end for the hashtag creator.

Exposes the createHashtags tool to RPC peers using MCP-style tool listing.
"""

from .definitions import AVAILABLE_TOOLS, TOOL_SCHEMAS, RpcError
from .dispatcher import RpcDispatcher, serve_stdio

__all__ = [
    "AVAILABLE_TOOLS",
    "TOOL_SCHEMAS",
    "RpcError",
    "RpcDispatcher",
    "serve_stdio",
]
