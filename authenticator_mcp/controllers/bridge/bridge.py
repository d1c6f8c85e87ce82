"""
Line-Delimited JSON-RPC Bridge

Reads JSON-RPC messages from stdin, forwards credential lookups to the
Authenticator App backend, and writes responses to stdout.

Each line is handled as its own task, so a slow backend call does not hold
up later requests. Responses may therefore arrive out of order; callers
match them by id.
"""

import asyncio
import json
import sys
import threading
from typing import Any, Optional, Sequence, TextIO

from authenticator_mcp.backend import AuthenticatorClient
from authenticator_mcp.configs import BACKEND_BASE_URL, get_logger, load_config_or_exit, setup_logging
from authenticator_mcp.exceptions import BackendError, ParameterValidationError
from authenticator_mcp.tools import Router, get_manifest
from authenticator_mcp.utils.stdout_guard import guard_stdout

logger = get_logger("bridge")

JSONRPC_VERSION = "2.0"
SERVER_ERROR = -32000
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

MANIFEST_METHOD = "getManifest"


class JsonRpcBridge:
    """
    Serves the credential operations over line-delimited JSON-RPC.

    Usage:
        bridge = JsonRpcBridge(router, sys.stdin, sys.stdout)
        await bridge.serve()
    """

    def __init__(self, router: Router, reader: TextIO, writer: TextIO):
        self.router = router
        self._reader = reader
        self._writer = writer
        self._methods = {op.rpc_method: op.name for op in router.operations.values()}

    def send_response(self, request_id: Any, result: Any) -> None:
        """Write a JSON-RPC result frame."""
        response = {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}
        print(json.dumps(response), file=self._writer, flush=True)

    def send_error(
        self,
        request_id: Any,
        code: int,
        message: str,
        data: Optional[dict] = None,
    ) -> None:
        """Write a JSON-RPC error frame."""
        error: dict[str, Any] = {"code": code, "message": message}
        if data is not None:
            error["data"] = data
        response = {"jsonrpc": JSONRPC_VERSION, "id": request_id, "error": error}
        print(json.dumps(response), file=self._writer, flush=True)

    async def handle_request(self, request: dict) -> None:
        """Route one decoded request and write exactly one response."""
        method = request.get("method")
        request_id = request.get("id")
        logger.debug(f"Received: {method} (id={request_id})")

        if method == MANIFEST_METHOD:
            self.send_response(request_id, get_manifest())
            return

        if not isinstance(method, str) or method not in self._methods:
            logger.warning(f"Unknown method: {method}")
            self.send_error(request_id, SERVER_ERROR, f"Unknown method: {method}")
            return

        try:
            result = await self.router.call(self._methods[method], request.get("params"))
        except ParameterValidationError as e:
            self.send_error(request_id, INVALID_PARAMS, e.message, {"fields": e.fields})
        except BackendError as e:
            logger.error(f"{method} failed: {e.message}")
            self.send_error(
                request_id,
                SERVER_ERROR,
                e.message,
                {"status": e.status_code, "body": e.response_text},
            )
        except Exception as e:
            logger.exception(f"{method} crashed: {type(e).__name__}")
            self.send_error(request_id, INTERNAL_ERROR, "Internal error")
        else:
            self.send_response(request_id, result.payload)

    async def handle_line(self, line: str) -> None:
        """Decode a line; malformed frames are logged and dropped."""
        try:
            request = json.loads(line)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid request: {e}")
            return

        if not isinstance(request, dict):
            logger.error(f"Invalid request: expected an object, got {type(request).__name__}")
            return

        await self.handle_request(request)

    def _log_task_failure(self, task: asyncio.Task) -> None:
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Request task failed: {task.exception()!r}")

    def _start_reader(self, loop: asyncio.AbstractEventLoop, lines: asyncio.Queue) -> None:
        """
        Feed input lines into the queue from a daemon thread.

        A blocked readline must not keep the event loop from shutting down,
        so the reader lives outside the loop's executor. None marks EOF.
        """

        def pump() -> None:
            while True:
                line = self._reader.readline()
                try:
                    loop.call_soon_threadsafe(lines.put_nowait, line or None)
                except RuntimeError:
                    # Loop already closed
                    return
                if not line:
                    return

        threading.Thread(target=pump, name="jsonrpc-stdin", daemon=True).start()

    async def serve(self) -> None:
        """Process input until EOF, then wait for in-flight requests."""
        loop = asyncio.get_running_loop()
        lines: asyncio.Queue = asyncio.Queue()
        pending: set[asyncio.Task] = set()
        self._start_reader(loop, lines)

        while True:
            line = await lines.get()
            if line is None:
                break
            line = line.strip()
            if not line:
                continue

            task = asyncio.create_task(self.handle_line(line))
            pending.add(task)
            task.add_done_callback(pending.discard)
            task.add_done_callback(self._log_task_failure)

        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        logger.info("Input closed, bridge stopping")


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for the JSON-RPC bridge."""
    config = load_config_or_exit(argv, description="Authenticator App JSON-RPC bridge")
    setup_logging()
    logger.info(
        f"JSON-RPC bridge starting, backend: {BACKEND_BASE_URL}, "
        f"token source: {config.token_source}"
    )

    router = Router(AuthenticatorClient(config.access_token))
    # Frames go to the real stdout; everything else printed is filtered out
    frames = sys.stdout
    try:
        with guard_stdout():
            asyncio.run(JsonRpcBridge(router, sys.stdin, frames).serve())
    except KeyboardInterrupt:
        logger.info("Bridge interrupted")
        sys.exit(0)
