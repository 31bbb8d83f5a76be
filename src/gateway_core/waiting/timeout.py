"""Deadline guard for awaitables.

:func:`with_timeout` races an awaitable against a timer armed with
``loop.call_later``.  Whichever settles first decides the outcome:

* the operation wins -- its result is returned, or its exception is
  re-raised unchanged;
* the timer wins -- :class:`OperationTimeout` is raised with the message
  ``"Timeout after {timeout_ms}ms: {label}"``.

The timer handle is cancelled in a ``finally`` block, so it is released on
every exit path, including cancellation of the caller.

Unlike :func:`asyncio.wait_for`, the guard does **not** cancel the
operation when the deadline passes.  The operation keeps running in the
background; callers that need the work stopped must do so themselves.
"""
from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Awaitable
from typing import TypeVar

from gateway_core.core.errors import InvalidWaitArgument, OperationTimeout

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_timeout(
    operation: Awaitable[T],
    timeout_ms: int | float,
    label: str,
) -> T:
    """Await *operation*, giving up after *timeout_ms* milliseconds.

    Parameters
    ----------
    operation:
        A coroutine, task or future.  Coroutines are scheduled as tasks.
    timeout_ms:
        Deadline in milliseconds.  Must be positive.
    label:
        Human-readable name of the operation, used in the timeout message.

    Returns
    -------
    T
        The operation's result, if it settles before the deadline.

    Raises
    ------
    OperationTimeout
        If the deadline passes first.
    InvalidWaitArgument
        If *timeout_ms* is not positive.
    TypeError
        If *operation* is not awaitable.  No timer is armed in that case.
    """
    if timeout_ms <= 0:
        if asyncio.iscoroutine(operation):
            operation.close()
        raise InvalidWaitArgument(
            f"timeout_ms must be positive, got {timeout_ms!r}",
            details={"timeout_ms": timeout_ms, "label": label},
        )

    loop = asyncio.get_running_loop()
    future = asyncio.ensure_future(operation)
    deadline: asyncio.Future[None] = loop.create_future()
    timer = loop.call_later(timeout_ms / 1000, _expire, deadline)
    try:
        await asyncio.wait((future, deadline), return_when=asyncio.FIRST_COMPLETED)
    finally:
        timer.cancel()
        deadline.cancel()
        if not future.done():
            future.add_done_callback(functools.partial(_log_late_outcome, label))

    if future.done():
        return future.result()

    logger.debug("with_timeout: %r gave up after %sms", label, timeout_ms)
    raise OperationTimeout(timeout_ms, label)


def _expire(deadline: asyncio.Future[None]) -> None:
    if not deadline.done():
        deadline.set_result(None)


def _log_late_outcome(label: str, future: asyncio.Future[object]) -> None:
    """Retrieve the outcome of an abandoned operation.

    Reading the exception marks it as retrieved, so asyncio does not
    report it as unhandled when the task is garbage collected.
    """
    if future.cancelled():
        logger.debug("with_timeout: abandoned %r was cancelled", label)
        return
    exc = future.exception()
    if exc is not None:
        logger.debug(
            "with_timeout: abandoned %r failed late: %s", label, type(exc).__name__,
        )
    else:
        logger.debug("with_timeout: abandoned %r finished late", label)
