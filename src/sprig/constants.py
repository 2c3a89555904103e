# topmark:header:start
#
#   project      : Sprig
#   file         : constants.py
#   file_relpath : src/sprig/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Sprig Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

SPRIG_VERSION: str = get_version("sprig")

# Documentation anchors are appended to this base when rendering "Learn more at:".
DOCS_BASE_URL: Final[str] = "https://sprig.dev/docs/#"

# Terminal column width used when word-wrapping diagnostic messages.
COLS: Final[int] = 80

# Environment variable consulted by `setup_logging()` when no level is given.
LOG_LEVEL_ENV_VAR: Final[str] = "SPRIG_LOG_LEVEL"
