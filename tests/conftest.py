"""Shared fixtures for gateway core tests."""
from __future__ import annotations

from typing import Any

import pytest

from gateway_core.redaction import SecretRedactor

# ---------------------------------------------------------------------------
# Redaction fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def redactor() -> SecretRedactor:
    return SecretRedactor()


@pytest.fixture()
def gateway_config() -> dict[str, Any]:
    """A gateway config tree with secrets at several depths."""
    return {
        "gateway": {"auth": {"token": "tok-123"}, "port": 18789},
        "channels": {"telegram": {"botToken": "tg-abc", "enabled": True}},
        "r2": {"accessKeyId": "akid", "secretAccessKey": "secret"},
        "openrouter": {"apiKey": "sk-or-123"},
        "models": [
            {"id": "x", "apiKey": "k1"},
            {"id": "y", "token": "k2"},
        ],
        "other": "value",
    }
