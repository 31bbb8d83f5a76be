"""Bounded status poller for externally owned processes.

:func:`wait_for_process` re-reads ``handle.status`` every
``poll_interval_ms`` until it leaves ``"running"`` or an attempt budget of
``ceil(timeout_ms / poll_interval_ms)`` sleeps is spent.

The bound is on the number of polls, not on wall-clock time: the status is
checked after each sleep, so the call can outlast ``timeout_ms`` by up to
one interval.  Running out of budget is not an error.  The function simply
returns and the caller reads ``handle.status`` to tell "finished" from
"gave up while still running".
"""
from __future__ import annotations

import asyncio
import logging
import math

from gateway_core.core.errors import InvalidWaitArgument
from gateway_core.core.types import ProcessHandle, is_terminal

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_MS = 500


def max_poll_attempts(timeout_ms: int | float, poll_interval_ms: int | float) -> int:
    """Return the poll budget for *timeout_ms* at *poll_interval_ms*.

    A non-positive *timeout_ms* yields a budget of zero.
    """
    if poll_interval_ms <= 0:
        raise InvalidWaitArgument(
            f"poll_interval_ms must be positive, got {poll_interval_ms!r}",
            details={"poll_interval_ms": poll_interval_ms},
        )
    return max(0, math.ceil(timeout_ms / poll_interval_ms))


async def wait_for_process(
    handle: ProcessHandle,
    timeout_ms: int | float,
    poll_interval_ms: int | float = DEFAULT_POLL_INTERVAL_MS,
) -> None:
    """Wait until *handle* leaves ``"running"`` or the poll budget is spent.

    Parameters
    ----------
    handle:
        Any object with a ``status`` attribute.  It is only read.
    timeout_ms:
        Approximate time budget in milliseconds.
    poll_interval_ms:
        Sleep between reads in milliseconds (default 500).

    Raises
    ------
    InvalidWaitArgument
        If *poll_interval_ms* is not positive.  Exhausting the budget
        never raises.
    """
    max_attempts = max_poll_attempts(timeout_ms, poll_interval_ms)
    attempts = 0
    status = handle.status
    while not is_terminal(status) and attempts < max_attempts:
        await asyncio.sleep(poll_interval_ms / 1000)
        attempts += 1
        status = handle.status

    if not is_terminal(status):
        logger.debug(
            "wait_for_process: still running after %d/%d polls (%sms budget)",
            attempts, max_attempts, timeout_ms,
        )
