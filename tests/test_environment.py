"""Tests for gateway environment validation and snapshots."""
from __future__ import annotations

import pytest

from gateway_core.environment import (
    KNOWN_VARS,
    PROVIDER_KEY_VARS,
    REQUIRED_VARS,
    env_snapshot,
    validate_required_env,
)
from gateway_core.redaction import SecretRedactor, redact_secrets

BASE_ENV: dict[str, str] = {
    "MOLTBOT_GATEWAY_TOKEN": "token",
    "CF_ACCESS_TEAM_DOMAIN": "team.example.com",
    "CF_ACCESS_AUD": "audience",
}
OPENROUTER_MODEL = "anthropic/claude-sonnet-4-5"
PROVIDER_MESSAGE = "ANTHROPIC_API_KEY, AI_GATEWAY_API_KEY or OPENROUTER_API_KEY"


def make_env(**overrides: str) -> dict[str, str]:
    """Return the base environment snapshot with *overrides* applied."""
    env = dict(BASE_ENV)
    env.update(overrides)
    return env


class TestValidateRequiredEnv:
    """Test validate_required_env rules."""

    def test_accepts_openrouter_only_configuration(self) -> None:
        env = make_env(
            OPENROUTER_API_KEY="sk-or-key",
            OPENROUTER_MODEL=OPENROUTER_MODEL,
        )
        assert validate_required_env(env) == []

    def test_accepts_anthropic_configuration(self) -> None:
        env = make_env(ANTHROPIC_API_KEY="sk-ant-key")
        assert validate_required_env(env) == []

    def test_accepts_ai_gateway_configuration(self) -> None:
        env = make_env(AI_GATEWAY_API_KEY="gw-key")
        assert validate_required_env(env) == []

    def test_requires_model_when_openrouter_key_set(self) -> None:
        env = make_env(OPENROUTER_API_KEY="sk-or-key")
        missing = validate_required_env(env)
        assert missing == ["OPENROUTER_MODEL (required when using OPENROUTER_API_KEY)"]

    def test_requires_key_when_openrouter_model_set(self) -> None:
        env = make_env(OPENROUTER_MODEL=OPENROUTER_MODEL)
        missing = validate_required_env(env)
        assert "OPENROUTER_API_KEY (required when using OPENROUTER_MODEL)" in missing
        assert PROVIDER_MESSAGE in missing

    def test_empty_environment(self) -> None:
        assert validate_required_env({}) == [*REQUIRED_VARS, PROVIDER_MESSAGE]

    @pytest.mark.parametrize("name", REQUIRED_VARS)
    def test_each_required_variable_reported(self, name: str) -> None:
        env = make_env(ANTHROPIC_API_KEY="sk-ant-key")
        del env[name]
        assert validate_required_env(env) == [name]

    @pytest.mark.parametrize("blank", ["", None])
    def test_blank_values_count_as_missing(self, blank: str | None) -> None:
        env: dict[str, str | None] = dict(BASE_ENV)
        env["ANTHROPIC_API_KEY"] = "sk-ant-key"
        env["CF_ACCESS_AUD"] = blank
        assert validate_required_env(env) == ["CF_ACCESS_AUD"]

    def test_provider_message_lists_every_provider(self) -> None:
        for name in PROVIDER_KEY_VARS:
            assert name in PROVIDER_MESSAGE


class TestEnvSnapshot:
    """Test env_snapshot extraction."""

    def test_copies_known_variables_only(self) -> None:
        source = {**BASE_ENV, "UNRELATED": "x", "PATH": "/usr/bin"}
        snapshot = env_snapshot(source)
        assert snapshot == BASE_ENV
        assert snapshot is not source

    def test_reads_process_environment_by_default(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        for name in KNOWN_VARS:
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("MOLTBOT_GATEWAY_TOKEN", "from-env")
        assert env_snapshot() == {"MOLTBOT_GATEWAY_TOKEN": "from-env"}

    def test_custom_names(self) -> None:
        assert env_snapshot({"A": "1", "B": "2"}, names=("A",)) == {"A": "1"}

    def test_snapshot_is_safe_to_log_after_redaction(self) -> None:
        source = make_env(
            OPENROUTER_API_KEY="sk-or-key",
            OPENROUTER_MODEL=OPENROUTER_MODEL,
            SLACK_APP_TOKEN="xapp-1",
            R2_SECRET_ACCESS_KEY="r2-secret",
        )
        redacted = redact_secrets(env_snapshot(source))
        assert redacted["MOLTBOT_GATEWAY_TOKEN"] == "[REDACTED]"
        assert redacted["SLACK_APP_TOKEN"] == "[REDACTED]"
        assert redacted["R2_SECRET_ACCESS_KEY"] == "[REDACTED]"
        assert redacted["OPENROUTER_MODEL"] == OPENROUTER_MODEL
        assert redacted["CF_ACCESS_TEAM_DOMAIN"] == "team.example.com"
        # "API_KEY" does not contain the "apiKey" fragment.
        assert redacted["OPENROUTER_API_KEY"] == "sk-or-key"

    def test_snapshot_redaction_ignoring_separators(self) -> None:
        source = make_env(
            OPENROUTER_API_KEY="sk-or-key",
            OPENROUTER_MODEL=OPENROUTER_MODEL,
        )
        redactor = SecretRedactor(ignore_separators=True)
        redacted = redactor.redact(env_snapshot(source))
        assert redacted["OPENROUTER_API_KEY"] == "[REDACTED]"
        assert redacted["MOLTBOT_GATEWAY_TOKEN"] == "[REDACTED]"
        assert redacted["OPENROUTER_MODEL"] == OPENROUTER_MODEL
