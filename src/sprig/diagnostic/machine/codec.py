# topmark:header:start
#
#   project      : Sprig
#   file         : codec.py
#   file_relpath : src/sprig/diagnostic/machine/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""JSON and NDJSON helpers for moving diagnostics between processes.

A single diagnostic travels as one JSON object; a batch travels as NDJSON (one
object per line, blank lines ignored). Decoding always validates the shape via
`MachineDiagnosticEntry.from_dict`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from sprig.config.logging import get_logger
from sprig.diagnostic.machine.schemas import DiagnosticPayloadError, MachineDiagnosticEntry

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from sprig.config.logging import SprigLogger
    from sprig.diagnostic.model import Diagnostic

logger: SprigLogger = get_logger(__name__)


def dumps_diagnostic(diagnostic: Diagnostic) -> str:
    """Serialize one diagnostic to a compact JSON object string."""
    payload: dict[str, object] = MachineDiagnosticEntry.from_diagnostic(diagnostic).to_dict()
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def dumps_ndjson(diagnostics: Iterable[Diagnostic]) -> str:
    """Serialize diagnostics to NDJSON (one object per line, trailing newline)."""
    return "".join(dumps_diagnostic(d) + "\n" for d in diagnostics)


def loads_diagnostic(text: str) -> Diagnostic:
    """Decode a diagnostic from a JSON object string.

    Raises:
        DiagnosticPayloadError: If ``text`` is not valid JSON or not a diagnostic.
    """
    try:
        payload: object = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.debug("Rejecting diagnostic payload: %s", exc)
        raise DiagnosticPayloadError(f"Invalid JSON: {exc}") from exc
    return MachineDiagnosticEntry.from_dict(payload).to_diagnostic()


def iter_ndjson_diagnostics(text: str) -> Iterator[Diagnostic]:
    """Yield diagnostics decoded from NDJSON text.

    Raises:
        DiagnosticPayloadError: On the first malformed line; the message names
            its 1-based line number.
    """
    # Split on "\n" only: JSON strings may carry raw U+2028 and friends.
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            continue
        try:
            yield loads_diagnostic(line)
        except DiagnosticPayloadError as exc:
            raise DiagnosticPayloadError(f"line {lineno}: {exc}") from exc
