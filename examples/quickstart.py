#!/usr/bin/env python3
"""Gateway core quickstart.

Demonstrates the three primitives the gateway relies on:

1. Validate the environment snapshot and print it with secrets redacted.
2. Guard a slow status call with ``with_timeout``.
3. Wait for a sandbox process with ``wait_for_process``.

Run:
    python examples/quickstart.py
"""
from __future__ import annotations

import asyncio
from types import SimpleNamespace

from gateway_core import (
    OperationTimeout,
    SecretRedactor,
    env_snapshot,
    validate_required_env,
    wait_for_process,
    with_timeout,
)


async def fetch_status(delay: float) -> str:
    await asyncio.sleep(delay)
    return "ok"


async def main() -> None:
    # -- Step 1: Validate and print the environment --------------------------
    env = env_snapshot(
        {
            "MOLTBOT_GATEWAY_TOKEN": "gw-token-123",
            "CF_ACCESS_TEAM_DOMAIN": "team.example.com",
            "CF_ACCESS_AUD": "audience",
            "OPENROUTER_API_KEY": "sk-or-key",
        }
    )
    # Env names use underscores, so let "apiKey" match "OPENROUTER_API_KEY".
    redactor = SecretRedactor(ignore_separators=True)
    print(f"[1] Environment: {redactor.redact_json(env, indent=2)}")
    for problem in validate_required_env(env):
        print(f"    missing: {problem}")

    # -- Step 2: Guard a call with a deadline --------------------------------
    print(f"[2] Fast call:  {await with_timeout(fetch_status(0.01), 500, 'status')}")
    try:
        await with_timeout(fetch_status(2), 100, "status")
    except OperationTimeout as exc:
        print(f"    Slow call: {exc}")

    # -- Step 3: Wait for a sandbox process ----------------------------------
    proc = SimpleNamespace(status="running")

    async def finish() -> None:
        await asyncio.sleep(0.3)
        proc.status = "completed"

    finisher = asyncio.create_task(finish())
    await wait_for_process(proc, timeout_ms=2000, poll_interval_ms=100)
    await finisher
    print(f"[3] Process status: {proc.status}")


if __name__ == "__main__":
    asyncio.run(main())
