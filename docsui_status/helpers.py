# helpers.py
"""Helper functions for search-box command parsing."""

from typing import List


# ---------------------------------------------------------------------------
# Command Parsing
# ---------------------------------------------------------------------------

DEBUG_COMMAND_PREFIX = "debug:"


def is_debug_command(s: str) -> bool:
    """Check if string is a debug command: the prefix followed by at least one character."""
    s = s or ""
    return len(s) > len(DEBUG_COMMAND_PREFIX) and s.startswith(DEBUG_COMMAND_PREFIX)


def strip_debug_prefix(s: str) -> str:
    s = s or ""
    if s.startswith(DEBUG_COMMAND_PREFIX):
        return s[len(DEBUG_COMMAND_PREFIX):]
    return s


def parse_args(cmd: str) -> List[str]:
    """Parse whitespace-separated arguments from command string."""
    return [p for p in (cmd or "").split() if p]


def parse_bool(value: str) -> bool:
    """Parse a boolean literal: 'true' in any case, anything else is False."""
    return (value or "").lower() == "true"
