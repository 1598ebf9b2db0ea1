# debug_flags.py
"""Process-wide debug flags toggled from the search box."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class DebugFlags:
    quick_viewer_override: Optional[str] = None
    gesture_scale_enabled: bool = False


# Global flags (initialized on first use, lives for the process)
_FLAGS: Optional[DebugFlags] = None


def get_debug_flags() -> DebugFlags:
    """Get or create the process-wide flags."""
    global _FLAGS
    if _FLAGS is None:
        _FLAGS = DebugFlags()
    return _FLAGS
