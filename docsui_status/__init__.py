"""Status-message resolution and debug command routing for a file-browsing surface."""

from .__about__ import __version__
from .commands import DebugCommandRouter
from .context import CapabilityContext, ShowInQuietMode, UserProperties
from .debug_flags import DebugFlags, get_debug_flags
from .enterprise import EnterpriseStringResolver, StaticOverrideProvider
from .environment import StatusEnvironment
from .header_message import resolve_header
from .inflate_message import resolve_body
from .message_slot import MessageSlot
from .models import (
    Action,
    AuthenticationRequired,
    CrossProfileException,
    CrossProfileNoPermissionException,
    CrossProfileQuietModeException,
    Event,
    Layout,
    Message,
    RootInfo,
    UserId,
)
from .quiet_mode import can_modify_quiet_mode
from .resources import IconRef, Resources

__all__ = [
    "__version__",
    "Action",
    "AuthenticationRequired",
    "CapabilityContext",
    "CrossProfileException",
    "CrossProfileNoPermissionException",
    "CrossProfileQuietModeException",
    "DebugCommandRouter",
    "DebugFlags",
    "EnterpriseStringResolver",
    "Event",
    "IconRef",
    "Layout",
    "Message",
    "MessageSlot",
    "Resources",
    "RootInfo",
    "ShowInQuietMode",
    "StaticOverrideProvider",
    "StatusEnvironment",
    "UserId",
    "UserProperties",
    "can_modify_quiet_mode",
    "get_debug_flags",
    "resolve_body",
    "resolve_header",
]
