"""Where: src/tidyfinder/config/settings.py
What: Fixed runtime constants describing Finder and its on-disk metadata.
Why: Expose shared names to feature layers without file I/O.
"""

from __future__ import annotations

from typing import Final

# Finder view-state metadata -------------------------------------------------

# Per-directory file holding icon positions and view style; copied verbatim.
METADATA_FILE_NAME: Final[str] = ".DS_Store"

# rw-r--r--
METADATA_FILE_MODE: Final[int] = 0o644


# Finder preference store ----------------------------------------------------

FINDER_DOMAIN: Final[str] = "com.apple.finder"
VIEW_STYLE_KEY: Final[str] = "FXPreferredViewStyle"

# Process name passed to ``killall`` when relaunching Finder.
FINDER_PROCESS_NAME: Final[str] = "Finder"


# External commands ----------------------------------------------------------

DEFAULTS_COMMAND: Final[str] = "defaults"
CHFLAGS_COMMAND: Final[str] = "chflags"
KILLALL_COMMAND: Final[str] = "killall"

COMMAND_TIMEOUT_SECONDS: Final[float] = 30.0


__all__ = [
    "CHFLAGS_COMMAND",
    "COMMAND_TIMEOUT_SECONDS",
    "DEFAULTS_COMMAND",
    "FINDER_DOMAIN",
    "FINDER_PROCESS_NAME",
    "KILLALL_COMMAND",
    "METADATA_FILE_MODE",
    "METADATA_FILE_NAME",
    "VIEW_STYLE_KEY",
]
