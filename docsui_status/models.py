# models.py
"""Listing events, resolved messages and the exception kinds they carry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .resources import IconRef


# ---------------------------------------------------------------------------
# Identity / roots
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UserId:
    identifier: int


@dataclass(frozen=True)
class RootInfo:
    authority: str
    user_id: UserId
    title: str = ""


class Action(Enum):
    OPEN = "open"
    OPEN_TREE = "open_tree"
    GET_CONTENT = "get_content"
    CREATE = "create"
    BROWSE = "browse"
    PICK_COPY_DESTINATION = "pick_copy_destination"


class Layout(Enum):
    NONE = 0
    CROSS_PROFILE_ERROR = 1


# ---------------------------------------------------------------------------
# Exception kinds carried by a listing update
# ---------------------------------------------------------------------------

class AuthenticationRequired(Exception):
    """The provider needs the user to sign in before it can list content."""

    def __init__(self, user_action: Any = None, message: str = "authentication required") -> None:
        super().__init__(message)
        self.user_action = user_action


class CrossProfileException(Exception):
    pass


class CrossProfileQuietModeException(CrossProfileException):
    def __init__(self, user_id: UserId) -> None:
        super().__init__(f"profile {user_id.identifier} is in quiet mode")
        self.user_id = user_id


class CrossProfileNoPermissionException(CrossProfileException):
    pass


@dataclass(frozen=True)
class Event:
    """Outcome of one listing/query cycle."""

    root: RootInfo
    action: Action = Action.OPEN
    error: Optional[str] = None
    info: Optional[str] = None
    exception: Optional[BaseException] = None
    result_count: int = 0
    search_mode: bool = False
    is_blocked_from_tree: bool = False
    restrict_scope_storage_enabled: bool = False

    @property
    def current_root_title(self) -> str:
        return self.root.title

    @property
    def has_exception(self) -> bool:
        return self.exception is not None

    @property
    def has_authentication_exception(self) -> bool:
        return isinstance(self.exception, AuthenticationRequired)

    @property
    def has_cross_profile_exception(self) -> bool:
        return isinstance(self.exception, CrossProfileException)


# ---------------------------------------------------------------------------
# Resolved message
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Message:
    title: Optional[str] = None
    body: Optional[str] = None
    button_label: Optional[str] = None
    icon: Optional[IconRef] = None
    layout: Layout = Layout.NONE
    should_show: bool = False
    should_keep: bool = False
    on_action: Optional[Callable[[], None]] = None

    @classmethod
    def cleared(cls) -> "Message":
        return cls()

    @classmethod
    def shown(
        cls,
        title: Optional[str],
        body: Optional[str],
        button_label: Optional[str],
        icon: Optional[IconRef],
        *,
        layout: Layout = Layout.NONE,
        should_keep: bool = False,
        on_action: Optional[Callable[[], None]] = None,
    ) -> "Message":
        """Build a visible message; a missing body yields a cleared one."""
        if body is None:
            return cls.cleared()
        return cls(
            title=title,
            body=body,
            button_label=button_label,
            icon=icon,
            layout=layout,
            should_show=True,
            should_keep=should_keep,
            on_action=on_action,
        )

    def run_action(self, default: Optional[Callable[[], None]] = None) -> None:
        if self.on_action is not None:
            self.on_action()
        elif default is not None:
            default()
