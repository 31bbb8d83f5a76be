"""Bounded waits on external asynchronous work.

* **with_timeout** -- race an awaitable against a deadline; the timer is
  always released and the operation is never cancelled by the guard.
* **wait_for_process** -- poll a process handle's ``status`` until it is
  terminal or an attempt budget is spent; never raises on exhaustion.
"""
from __future__ import annotations

from gateway_core.waiting.polling import (
    DEFAULT_POLL_INTERVAL_MS,
    max_poll_attempts,
    wait_for_process,
)
from gateway_core.waiting.timeout import with_timeout

__all__ = [
    "DEFAULT_POLL_INTERVAL_MS",
    "max_poll_attempts",
    "wait_for_process",
    "with_timeout",
]
