"""JSON-RPC dispatcher for the createHashtags tool.

Handles ping, tools/list and tools/call envelopes. Transport is up to the
caller: ``handle`` takes a decoded message, ``handle_message`` a raw JSON
string, and ``serve_stdio`` runs a line-delimited loop over text streams.
"""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, TextIO

from pydantic import TypeAdapter

from .. import __version__
from ..errors import HashtagCreatorError
from ..hashtag import create_hashtags
from .definitions import (
    CREATE_HASHTAGS_TOOL,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_NAME,
    TOOL_SCHEMAS,
    RpcError,
)

# Logger for RPC traffic
_logger = logging.getLogger("rpc_server")

Clock = Callable[[], datetime]

# Same ISO 8601 rendering as HashtagResult.generated_at
_TIMESTAMP = TypeAdapter(datetime)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RpcDispatcher:
    """Routes JSON-RPC requests to the hashtag creator.

    Example:
        dispatcher = RpcDispatcher()
        response = dispatcher.handle({"jsonrpc": "2.0", "method": "ping", "id": 1})
        print(response["result"]["status"])  # "ok"
    """

    def __init__(self, clock: Clock | None = None):
        """Initialize the dispatcher.

        Args:
            clock: Returns the current time. Defaults to UTC wall clock.
        """
        self.clock = clock or _utc_now
        self._handlers: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
            "ping": self._handle_ping,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tool_call,
        }

    def handle(self, request: Any) -> dict[str, Any]:
        """Dispatch one decoded JSON-RPC request and return the response."""
        if not isinstance(request, dict):
            return self._error(None, RpcError(PARSE_ERROR, "Parse error"))

        method = request.get("method")
        request_id = request.get("id")
        params = request.get("params")
        if not isinstance(params, dict):
            params = {}

        handler = self._handlers.get(method) if isinstance(method, str) else None
        if handler is None:
            _logger.warning(f"RPC_UNKNOWN_METHOD | method:{method} | id:{request_id}")
            return self._error(request_id, RpcError(METHOD_NOT_FOUND, f"Method not found: {method}"))

        _logger.info(f"RPC_REQUEST | method:{method} | id:{request_id}")
        start_time = time.time()
        try:
            result = handler(params)
        except _ToolCallError as e:
            return self._error(request_id, e.error)
        finally:
            duration_ms = int((time.time() - start_time) * 1000)
            _logger.debug(f"RPC_DONE | method:{method} | id:{request_id} | duration:{duration_ms}ms")

        return {"jsonrpc": JSONRPC_VERSION, "result": result, "id": request_id}

    def handle_message(self, raw: str | bytes) -> str:
        """Decode a raw JSON message, dispatch it and encode the response."""
        try:
            request = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            _logger.error(f"RPC_PARSE_ERROR | error:{e}")
            response = self._error(None, RpcError(PARSE_ERROR, "Parse error"))
        else:
            response = self.handle(request)
        return json.dumps(response, ensure_ascii=False)

    def _handle_ping(self, params: dict[str, Any]) -> dict[str, Any]:
        return {
            "status": "ok",
            "agent": SERVER_NAME,
            "version": __version__,
            "timestamp": _TIMESTAMP.dump_python(self.clock(), mode="json"),
        }

    def _handle_tools_list(self, params: dict[str, Any]) -> dict[str, Any]:
        return {"tools": TOOL_SCHEMAS}

    def _handle_tool_call(self, params: dict[str, Any]) -> dict[str, Any]:
        name = params.get("name")
        if name != CREATE_HASHTAGS_TOOL:
            raise _ToolCallError(RpcError(INVALID_PARAMS, f"Unknown tool: {name}"))

        try:
            result = create_hashtags(params.get("arguments") or {}, now=self.clock())
        except HashtagCreatorError as e:
            _logger.warning(f"RPC_TOOL_ERROR | tool:{name} | error:{e}")
            raise _ToolCallError(RpcError(INTERNAL_ERROR, str(e))) from e

        return {"content": result.to_dict()}

    @staticmethod
    def _error(request_id: Any, error: RpcError) -> dict[str, Any]:
        return {"jsonrpc": JSONRPC_VERSION, "error": error.to_dict(), "id": request_id}


class _ToolCallError(Exception):
    """Carries an RpcError out of a method handler."""

    def __init__(self, error: RpcError):
        super().__init__(error.message)
        self.error = error


def serve_stdio(input_stream: TextIO, output_stream: TextIO, dispatcher: RpcDispatcher | None = None) -> int:
    """Serve line-delimited JSON-RPC until the input stream closes.

    Args:
        input_stream: One JSON request per line.
        output_stream: Receives one JSON response per line.
        dispatcher: Dispatcher to use. A default one is created if omitted.

    Returns:
        Number of requests handled.
    """
    dispatcher = dispatcher or RpcDispatcher()
    handled = 0
    _logger.info(f"RPC_SERVE_START | agent:{SERVER_NAME} | version:{__version__}")

    for line in input_stream:
        line = line.strip()
        if not line:
            continue
        output_stream.write(dispatcher.handle_message(line) + "\n")
        output_stream.flush()
        handled += 1

    _logger.info(f"RPC_SERVE_END | handled:{handled}")
    return handled
