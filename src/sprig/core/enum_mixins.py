# topmark:header:start
#
#   project      : Sprig
#   file         : enum_mixins.py
#   file_relpath : src/sprig/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Generic Enum utilities for Sprig (typing-friendly, UI-agnostic).

Provided:
    - ``KeyedStrEnum``: ``str`` Enum whose ``.value`` is a stable machine key,
      with a human ``.label`` and optional parsing ``aliases``.

Design:
    - Keep the helpers *pure* and side-effect free.
    - Avoid bringing UI libraries (e.g. yachalk) into this module.

Example:
    ```python
    class Phase(KeyedStrEnum):
        SETUP = ("setup", "Setup", ("before",))
        TEARDOWN = ("teardown", "Teardown")

    assert Phase.parse("Before") is Phase.SETUP
    assert Phase.SETUP.label == "Setup"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match keys, names and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    def __str__(self) -> str:
        """Return the human label, so members read naturally in messages."""
        return self.label

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return self._value_

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against:
          - the stable key (`.value`)
          - the member name (`.name`)
          - the label (`.label`)
          - any configured aliases

        Matching is case-insensitive and normalizes '-', ' ' to '_' via `_norm_token()`.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            candidates = (m.value, m.name, m.label, *m.aliases)
            if any(token == _norm_token(c) for c in candidates):
                return m
        return None
