"""Gateway environment validation.

The gateway refuses to start until its environment is complete.  This
module checks a plain snapshot of the environment and reports what is
missing as a list of human-readable entries; an empty list means the
configuration is usable.

Rules:
1. The gateway token and the Access team domain/audience are always
   required.
2. At least one model provider key must be set.
3. ``OPENROUTER_API_KEY`` and ``OPENROUTER_MODEL`` only make sense
   together; either one without the other is reported.

The snapshot is a plain dict, so callers can pass it through
:func:`gateway_core.redaction.redact_secrets` before logging it.
"""
from __future__ import annotations

import os
from collections.abc import Mapping

# Variables the gateway cannot start without.
REQUIRED_VARS: tuple[str, ...] = (
    "MOLTBOT_GATEWAY_TOKEN",
    "CF_ACCESS_TEAM_DOMAIN",
    "CF_ACCESS_AUD",
)

# Any one of these configures a model provider.
PROVIDER_KEY_VARS: tuple[str, ...] = (
    "ANTHROPIC_API_KEY",
    "AI_GATEWAY_API_KEY",
    "OPENROUTER_API_KEY",
)

# Pairs of (variable, variable it requires).
DEPENDENT_VARS: tuple[tuple[str, str], ...] = (
    ("OPENROUTER_API_KEY", "OPENROUTER_MODEL"),
    ("OPENROUTER_MODEL", "OPENROUTER_API_KEY"),
)

OPTIONAL_VARS: tuple[str, ...] = (
    "ANTHROPIC_BASE_URL",
    "AI_GATEWAY_BASE_URL",
    "OPENROUTER_MODEL",
    "TELEGRAM_BOT_TOKEN",
    "DISCORD_BOT_TOKEN",
    "SLACK_BOT_TOKEN",
    "SLACK_APP_TOKEN",
    "R2_ACCESS_KEY_ID",
    "R2_SECRET_ACCESS_KEY",
    "CF_ACCOUNT_ID",
)

KNOWN_VARS: tuple[str, ...] = tuple(
    dict.fromkeys(REQUIRED_VARS + PROVIDER_KEY_VARS + OPTIONAL_VARS)
)


def _is_set(env: Mapping[str, str | None], name: str) -> bool:
    return bool(env.get(name))


def validate_required_env(env: Mapping[str, str | None]) -> list[str]:
    """Return a list describing every missing or inconsistent variable.

    Parameters
    ----------
    env:
        Environment snapshot.  A variable counts as set when its value is
        a non-empty string.

    Returns
    -------
    list[str]
        One entry per problem, in a stable order: required variables
        first, then the provider check, then dependency violations such as
        ``"OPENROUTER_MODEL (required when using OPENROUTER_API_KEY)"``.
    """
    missing: list[str] = [name for name in REQUIRED_VARS if not _is_set(env, name)]

    if not any(_is_set(env, name) for name in PROVIDER_KEY_VARS):
        missing.append(
            ", ".join(PROVIDER_KEY_VARS[:-1]) + f" or {PROVIDER_KEY_VARS[-1]}"
        )

    for present, needed in DEPENDENT_VARS:
        if _is_set(env, present) and not _is_set(env, needed):
            missing.append(f"{needed} (required when using {present})")

    return missing


def env_snapshot(
    environ: Mapping[str, str] | None = None,
    *,
    names: tuple[str, ...] = KNOWN_VARS,
) -> dict[str, str]:
    """Copy the gateway's variables out of *environ* (``os.environ`` by default).

    Unset variables are omitted; the result is a new plain dict.
    """
    source = os.environ if environ is None else environ
    snapshot: dict[str, str] = {}
    for name in names:
        val = source.get(name)
        if val is not None:
            snapshot[name] = val
    return snapshot
