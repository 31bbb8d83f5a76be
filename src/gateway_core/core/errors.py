"""Gateway core error-code hierarchy.

Hierarchy
---------
::

    GatewayError
    +-- WaitError             (GW-E2xx)
        +-- OperationTimeout      (GW-E200, also a builtin TimeoutError)
        +-- InvalidWaitArgument   (GW-E201, also a builtin ValueError)

Usage
-----
Catch by category::

    try:
        await with_timeout(fetch_status(), 5_000, "fetch status")
    except WaitError:
        ...

Because :class:`OperationTimeout` also derives from :class:`TimeoutError`,
callers that only know the builtin can still catch it.
"""
from __future__ import annotations

from typing import Any

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class GatewayError(Exception):
    """Base exception for all gateway core errors.

    Attributes
    ----------
    code : str
        Error code, e.g. ``"GW-E200"``.
    message : str
        Human-readable description (MUST NOT contain secret values).
    details : dict[str, Any]
        Machine-readable context specific to the error instance.
    """

    code: str = "GW-E000"
    message: str = "Unknown gateway error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.details: dict[str, Any] = details or {}
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the error for logs and API responses."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            payload["detail"] = self.details
        return {"error": payload}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


# ===================================================================
# Category base class
# ===================================================================

class WaitError(GatewayError):
    """GW-E2xx -- Bounded-wait errors."""

    code = "GW-E2XX"


# ===================================================================
# GW-E2xx  Bounded-wait errors
# ===================================================================

class OperationTimeout(WaitError, TimeoutError):
    """GW-E200 -- A guarded operation did not settle before its deadline."""

    code = "GW-E200"
    message = "Operation timed out"

    def __init__(self, timeout_ms: int | float, label: str) -> None:
        super().__init__(
            f"Timeout after {timeout_ms}ms: {label}",
            details={"timeout_ms": timeout_ms, "label": label},
        )
        self.timeout_ms = timeout_ms
        self.label = label


class InvalidWaitArgument(WaitError, ValueError):
    """GW-E201 -- A wait primitive was called with an unusable argument."""

    code = "GW-E201"
    message = "Invalid wait argument"
