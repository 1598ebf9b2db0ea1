from .debug import (
    DebugCommandRouter,
    CommandHandler,
    handle_gesture_scale,
    handle_quick_viewer,
)

__all__ = [
    "DebugCommandRouter",
    "CommandHandler",
    "handle_gesture_scale",
    "handle_quick_viewer",
]
