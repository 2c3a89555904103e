# topmark:header:start
#
#   project      : Sprig
#   file         : location.py
#   file_relpath : src/sprig/core/location.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Source locations for diagnostics.

A `CodeLocation` identifies the call site associated with a diagnostic (file and
line). It is a plain, comparable value: the default-constructed instance,
exported as `ZERO_LOCATION`, means "no location available" and is never rendered.

Locations are captured at registration time by the tree builder through
`capture_location()` and then travel with the diagnostic, possibly across a
process boundary, so they hold no reference to frames or modules.
"""

from __future__ import annotations

import inspect
import traceback
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import FrameType


@dataclass(frozen=True, slots=True)
class CodeLocation:
    """Immutable call-site identifier.

    Attributes:
        file_name: Path of the source file, as reported by the interpreter.
        line_number: 1-based line number within ``file_name``.
        full_stack_trace: Optional formatted stack captured with the location.
    """

    file_name: str = ""
    line_number: int = 0
    full_stack_trace: str = ""

    @property
    def is_zero(self) -> bool:
        """Return True if file and line are unset; the stack trace is not considered."""
        return not self.file_name and self.line_number == 0

    def __str__(self) -> str:
        return f"{self.file_name}:{self.line_number}"


ZERO_LOCATION: CodeLocation = CodeLocation()


def capture_location(skip: int = 0, *, with_stack: bool = False) -> CodeLocation:
    """Capture the location of the caller.

    Args:
        skip: Number of additional frames to walk up. ``0`` returns the location of
            the code calling `capture_location()`; ``1`` its caller, and so on.
        with_stack: If True, also store the formatted stack leading to that frame.

    Returns:
        The captured location, or `ZERO_LOCATION` if the stack is not deep enough.
    """
    frame: FrameType | None = inspect.currentframe()
    try:
        # Start at our caller, then walk `skip` more frames
        target: FrameType | None = frame.f_back if frame is not None else None
        for _ in range(skip):
            if target is None:
                break
            target = target.f_back
        if target is None:
            return ZERO_LOCATION
        stack: str = "".join(traceback.format_stack(target)) if with_stack else ""
        return CodeLocation(
            file_name=target.f_code.co_filename,
            line_number=target.f_lineno or 0,
            full_stack_trace=stack,
        )
    finally:
        # Break the reference cycle between this frame and the local
        del frame
