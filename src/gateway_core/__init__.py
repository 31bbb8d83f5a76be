"""Gateway core primitives.

Small building blocks used by the gateway process in front of a sandboxed
assistant runtime.

Modules
-------
* Secret redaction (:mod:`gateway_core.redaction`)
* Bounded waits (:mod:`gateway_core.waiting`)
* Environment validation (:mod:`gateway_core.environment`)
"""
from __future__ import annotations

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Core types, errors, config
# ---------------------------------------------------------------------------
from gateway_core.core.config import (
    DEFAULT_REDACTION_MARKER,
    DEFAULT_SECRET_KEY_FRAGMENTS,
    GatewayCoreConfig,
)
from gateway_core.core.errors import (
    GatewayError,
    InvalidWaitArgument,
    OperationTimeout,
    WaitError,
)
from gateway_core.core.types import RUNNING_STATUS, JsonValue, ProcessHandle

# ---------------------------------------------------------------------------
# Environment validation
# ---------------------------------------------------------------------------
from gateway_core.environment import env_snapshot, validate_required_env

# ---------------------------------------------------------------------------
# Secret redaction
# ---------------------------------------------------------------------------
from gateway_core.redaction import SecretRedactor, redact_json, redact_secrets

# ---------------------------------------------------------------------------
# Bounded waits
# ---------------------------------------------------------------------------
from gateway_core.waiting import (
    DEFAULT_POLL_INTERVAL_MS,
    max_poll_attempts,
    wait_for_process,
    with_timeout,
)

__all__ = [
    # Meta
    "__version__",
    # Core types
    "JsonValue",
    "ProcessHandle",
    "RUNNING_STATUS",
    # Config
    "GatewayCoreConfig",
    "DEFAULT_REDACTION_MARKER",
    "DEFAULT_SECRET_KEY_FRAGMENTS",
    # Error hierarchy
    "GatewayError",
    "WaitError",
    "OperationTimeout",
    "InvalidWaitArgument",
    # Redaction
    "SecretRedactor",
    "redact_secrets",
    "redact_json",
    # Waiting
    "with_timeout",
    "wait_for_process",
    "max_poll_attempts",
    "DEFAULT_POLL_INTERVAL_MS",
    # Environment
    "validate_required_env",
    "env_snapshot",
]
