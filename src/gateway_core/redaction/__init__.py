"""Secret redaction for configuration and log payloads.

* **SecretRedactor** -- recursive, non-mutating redaction of JSON-like
  values driven by an injectable list of secret key fragments.
* **redact_secrets** / **redact_json** -- module-level helpers using the
  default policy.
"""
from __future__ import annotations

from gateway_core.redaction.redactor import (
    SecretRedactor,
    redact_json,
    redact_secrets,
)

__all__ = [
    "SecretRedactor",
    "redact_json",
    "redact_secrets",
]
