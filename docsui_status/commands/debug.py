# commands/debug.py
"""Debug commands typed into the search box (``debug:<keyword> [args]``)."""

import logging
from functools import partial
from typing import Callable, List, Optional

from ..config import DEBUG_BUILD
from ..debug_flags import DebugFlags, get_debug_flags
from ..helpers import is_debug_command, parse_args, parse_bool, strip_debug_prefix


logger = logging.getLogger("docsui_status.commands.debug")

# Receives the tokens after the prefix; True means recognized and handled.
CommandHandler = Callable[[List[str]], bool]


# ---------------------------------------------------------------------------
# Built-in handlers
# ---------------------------------------------------------------------------

def handle_quick_viewer(tokens: List[str], *, flags: DebugFlags) -> bool:
    """qv <package> sets the quick viewer override; deqv clears it."""
    if not tokens:
        return False
    if tokens[0] == "qv":
        if len(tokens) == 2 and tokens[1]:
            flags.quick_viewer_override = tokens[1]
            logger.info("Set quick viewer to: %s", tokens[1])
            return True
        logger.warning("Invalid command structure: %s", " ".join(tokens))
    elif tokens[0] == "deqv":
        flags.quick_viewer_override = None
        logger.info("Unset quick viewer")
        return True
    return False


def handle_gesture_scale(tokens: List[str], *, flags: DebugFlags) -> bool:
    """gs enables gesture scaling; gs <bool> sets it explicitly."""
    if not tokens or tokens[0] != "gs":
        return False
    if len(tokens) == 1:
        flags.gesture_scale_enabled = True
        logger.info("Set gesture scale enabled to: %s", True)
        return True
    if len(tokens) == 2 and tokens[1]:
        enabled = parse_bool(tokens[1])
        flags.gesture_scale_enabled = enabled
        logger.info("Set gesture scale enabled to: %s", enabled)
        return True
    logger.warning("Invalid command structure: %s", " ".join(tokens))
    return False


# ---------------------------------------------------------------------------
# Router
# ---------------------------------------------------------------------------

class DebugCommandRouter:
    """Ordered chain of debug command handlers; the first handler to accept wins."""

    def __init__(self, *handlers: CommandHandler, flags: Optional[DebugFlags] = None) -> None:
        self.flags = flags if flags is not None else get_debug_flags()
        self._handlers: List[CommandHandler] = list(handlers)

    @classmethod
    def default(
        cls,
        flags: Optional[DebugFlags] = None,
        *,
        debug_build: bool = DEBUG_BUILD,
    ) -> "DebugCommandRouter":
        """Router with the built-in commands, registered only on debug builds."""
        router = cls(flags=flags)
        if debug_build:
            router.add_handler(partial(handle_quick_viewer, flags=router.flags))
            router.add_handler(partial(handle_gesture_scale, flags=router.flags))
        return router

    def add_handler(self, handler: CommandHandler) -> None:
        self._handlers.append(handler)

    @property
    def handlers(self) -> List[CommandHandler]:
        return list(self._handlers)

    def route(self, query: str) -> bool:
        """Return True if *query* was consumed as a debug command.

        An unrecognized command is still consumed; it is only logged.
        """
        if not is_debug_command(query):
            return False

        tokens = parse_args(strip_debug_prefix(query))
        if not tokens:
            return False

        for handler in self._handlers:
            if handler(tokens):
                logger.debug("debug command handled: %s", tokens[0])
                return True

        logger.warning("Unrecognized debug command: %s", query)
        return True
