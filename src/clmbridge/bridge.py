"""Callback bridge: turn one callback-taking host call into an awaitable.

The host reports completion exactly once per call through its callback.
call_host() wraps that single completion in an asyncio future:

- a mapping with a truthy "success" key resolves the future with the mapping
- anything else rejects it with HostCallFailure, using the host's message
  or the configured default message

A second callback invocation for the same call is a host bug. It is
logged at ERROR level and its payload is dropped; the first outcome stands.

No timeout is applied. If the host never invokes the callback, the
awaiting coroutine stays suspended; callers that need a deadline wrap the
await themselves.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional, Tuple

from clmbridge.config import config
from clmbridge.errors import HostCallFailure
from clmbridge.host.base import HostCallback, HostResponse

logger = logging.getLogger(__name__)


def interpret_response(
    response: Any, default_message: Optional[str] = None
) -> Tuple[bool, str]:
    """Classify a host callback payload.

    Args:
        response: Whatever the host passed to the callback
        default_message: Message used when the host gives none

    Returns:
        (success, message) where message is never empty on failure
    """
    if isinstance(response, Mapping):
        if response.get("success"):
            return True, ""
        message = response.get("message")
        if message:
            return False, str(message)
    return False, default_message or config.default_error_message


async def call_host(
    invoke: Callable[[HostCallback], None],
    operation: str,
    default_message: Optional[str] = None,
) -> HostResponse:
    """Issue one host call and await its callback.

    Args:
        invoke: Function issuing the host call with the given callback
        operation: Operation name used in errors and logs
        default_message: Failure message when the host gives none

    Returns:
        The host response mapping

    Raises:
        HostCallFailure: The host reported failure or an unusable payload,
            or raised while the call was being issued
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future = loop.create_future()

    def settle(response: Any) -> None:
        if future.cancelled():
            logger.debug(f"Result of {operation} arrived after the caller stopped waiting")
            return
        if future.done():
            logger.error(
                f"Host callback for {operation} fired more than once; "
                f"dropping payload: {response!r}"
            )
            return
        success, message = interpret_response(response, default_message)
        if success:
            future.set_result(response)
        else:
            future.set_exception(HostCallFailure(message, operation=operation, response=response))

    def on_complete(response: Any) -> None:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            settle(response)
        elif loop.is_closed():
            logger.debug(f"Result of {operation} arrived after its event loop closed")
        else:
            # Callback delivered from another thread
            try:
                loop.call_soon_threadsafe(settle, response)
            except RuntimeError:
                logger.debug(f"Result of {operation} arrived after its event loop closed")

    try:
        invoke(on_complete)
    except HostCallFailure:
        raise
    except Exception as e:
        raise HostCallFailure(
            f"{operation} failed: {type(e).__name__}: {e}", operation=operation
        ) from e

    return await future
