"""Gateway core configuration.

Defines the validated configuration model for the redaction policy.  A
bare ``GatewayCoreConfig()`` reproduces the built-in defaults, so
configuration is only needed to change the key-matching policy or the
replacement marker.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_REDACTION_MARKER = "[REDACTED]"

# Case-insensitive fragments; a key containing any of them is secret.
DEFAULT_SECRET_KEY_FRAGMENTS: tuple[str, ...] = (
    "apiKey",
    "accessKey",
    "secret",
    "token",
    "botToken",
    "appToken",
)


class GatewayCoreConfig(BaseModel):
    """Configuration for the secret redactor.

    The secret-key fragment list is the whole redaction policy.  Keeping
    it here, as data, lets it be reviewed and overridden without touching
    the traversal code.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    redaction_marker: str = Field(
        default=DEFAULT_REDACTION_MARKER,
        min_length=1,
        description="Replacement written in place of every secret value.",
    )
    secret_key_fragments: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SECRET_KEY_FRAGMENTS),
        min_length=1,
        description=(
            "Key-name fragments matched case-insensitively; a mapping key "
            "containing any fragment has its value redacted."
        ),
    )
    ignore_key_separators: bool = Field(
        default=False,
        description=(
            "When True, '_' and '-' are dropped from keys and fragments "
            "before matching, so 'apiKey' also matches 'OPENROUTER_API_KEY'."
        ),
    )
