"""Recursive secret redaction for JSON-like structures.

**THIS IS SECURITY CODE.**  Its output is what ends up in logs and admin
views, so it must never leak a value stored under a sensitive key.

The algorithm is a depth-first structural copy:

1. **Mappings** -- every entry is kept.  If the key matches the
   secret-key predicate the value is replaced by the marker, whatever its
   type, and the traversal does not descend into it.  Otherwise the value
   is redacted recursively.
2. **Sequences** -- elements have no key, so each one is redacted
   recursively.  Order and length are preserved; tuples come back as
   lists.
3. **Scalars** -- returned unchanged.  A scalar root therefore passes
   through untouched.

Guarantees:

* The input is never mutated and the output shares no container with it.
* The function is total over JSON-like values and idempotent, since the
  marker string contains no keys to match.
* Cyclic input is not supported and recurses until ``RecursionError``.
"""
from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from gateway_core.core.config import (
    DEFAULT_REDACTION_MARKER,
    DEFAULT_SECRET_KEY_FRAGMENTS,
)

if TYPE_CHECKING:
    from gateway_core.core.config import GatewayCoreConfig
    from gateway_core.core.types import JsonValue


class SecretRedactor:
    """Replaces values stored under secret-looking keys with a marker.

    The policy is the fragment list passed at construction; the matching
    rule is a case-insensitive substring test, so ``"secretAccessKey"``
    and ``"SLACK_BOT_TOKEN"`` are caught by the defaults while
    ``"api_key_hint"`` is not.  Pass ``ignore_separators=True`` to also
    drop ``_`` and ``-`` before comparing, which makes ``"apiKey"`` catch
    ``"OPENROUTER_API_KEY"``.

    This class is stateless after construction and thread-safe.

    Usage
    -----
    ::

        redactor = SecretRedactor()
        safe = redactor.redact({"gateway": {"auth": {"token": "tok-123"}}})
        # {"gateway": {"auth": {"token": "[REDACTED]"}}}
    """

    __slots__ = ("_fragments", "_ignore_separators", "_marker")

    def __init__(
        self,
        fragments: Iterable[str] = DEFAULT_SECRET_KEY_FRAGMENTS,
        *,
        marker: str = DEFAULT_REDACTION_MARKER,
        ignore_separators: bool = False,
    ) -> None:
        self._ignore_separators = ignore_separators
        self._fragments: tuple[str, ...] = tuple(
            self._normalize(fragment) for fragment in fragments if fragment
        )
        if not self._fragments:
            raise ValueError("SecretRedactor requires at least one key fragment")
        self._marker = marker

    @classmethod
    def from_config(cls, config: GatewayCoreConfig) -> SecretRedactor:
        """Build a redactor from a :class:`GatewayCoreConfig`."""
        return cls(
            config.secret_key_fragments,
            marker=config.redaction_marker,
            ignore_separators=config.ignore_key_separators,
        )

    @property
    def marker(self) -> str:
        """The replacement string written in place of secret values."""
        return self._marker

    @property
    def fragments(self) -> tuple[str, ...]:
        """Lowercased key fragments, without separators if those are ignored."""
        return self._fragments

    def matches(self, key: object) -> bool:
        """Return ``True`` if *key* names a secret under this policy."""
        name = self._normalize(str(key))
        return any(fragment in name for fragment in self._fragments)

    def redact(self, value: JsonValue) -> JsonValue:
        """Return a redacted deep copy of *value*."""
        if isinstance(value, Mapping):
            result: dict[Any, JsonValue] = {}
            for key, child in value.items():
                if self.matches(key):
                    result[key] = self._marker
                else:
                    result[key] = self.redact(child)
            return result

        if isinstance(value, (list, tuple)):
            return [self.redact(item) for item in value]

        return value

    def redact_json(self, value: JsonValue, **dumps_kwargs: Any) -> str:
        """Redact *value* and serialise it with :func:`json.dumps`."""
        dumps_kwargs.setdefault("ensure_ascii", False)
        return json.dumps(self.redact(value), **dumps_kwargs)

    def _normalize(self, name: str) -> str:
        name = name.lower()
        if self._ignore_separators:
            name = name.replace("_", "").replace("-", "")
        return name


_DEFAULT_REDACTOR = SecretRedactor()


def redact_secrets(value: JsonValue) -> JsonValue:
    """Redact *value* with the default policy and ``"[REDACTED]"`` marker."""
    return _DEFAULT_REDACTOR.redact(value)


def redact_json(value: JsonValue, **dumps_kwargs: Any) -> str:
    """Redact *value* with the default policy and return it as JSON text."""
    return _DEFAULT_REDACTOR.redact_json(value, **dumps_kwargs)
