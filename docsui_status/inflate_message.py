# inflate_message.py
"""Body channel: the message inflated in place of an empty or failed result list."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .context import CapabilityContext
from .enterprise import (
    CANT_SAVE_TO_PERSONAL_MESSAGE,
    CANT_SAVE_TO_PERSONAL_TITLE,
    CANT_SAVE_TO_WORK_MESSAGE,
    CANT_SAVE_TO_WORK_TITLE,
    CANT_SELECT_PERSONAL_FILES_MESSAGE,
    CANT_SELECT_PERSONAL_FILES_TITLE,
    CANT_SELECT_WORK_FILES_MESSAGE,
    CANT_SELECT_WORK_FILES_TITLE,
    CROSS_PROFILE_NOT_ALLOWED_MESSAGE,
    CROSS_PROFILE_NOT_ALLOWED_TITLE,
    WORK_PROFILE_OFF_ENABLE_BUTTON,
    WORK_PROFILE_OFF_ERROR_TITLE,
    WORK_PROFILE_OFF_ICON,
)
from .environment import StatusEnvironment
from .models import (
    Action,
    CrossProfileNoPermissionException,
    CrossProfileQuietModeException,
    Event,
    Layout,
    Message,
)


logger = logging.getLogger("docsui_status.inflate")

# Actions that read from another profile share one wording family.
_ACCESS_ACTIONS = (Action.OPEN, Action.OPEN_TREE, Action.GET_CONTENT)

# (title key, message key) pairs, enterprise key first, built-in fallback second.
_WORK_WORDING = {
    "access": (
        (CANT_SELECT_WORK_FILES_TITLE, "cant_select_work_files_error_title"),
        (CANT_SELECT_WORK_FILES_MESSAGE, "cant_select_work_files_error_message"),
    ),
    "create": (
        (CANT_SAVE_TO_WORK_TITLE, "cant_save_to_work_error_title"),
        (CANT_SAVE_TO_WORK_MESSAGE, "cant_save_to_work_error_message"),
    ),
}
_PERSONAL_WORDING = {
    "access": (
        (CANT_SELECT_PERSONAL_FILES_TITLE, "cant_select_personal_files_error_title"),
        (CANT_SELECT_PERSONAL_FILES_MESSAGE, "cant_select_personal_files_error_message"),
    ),
    "create": (
        (CANT_SAVE_TO_PERSONAL_TITLE, "cant_save_to_personal_error_title"),
        (CANT_SAVE_TO_PERSONAL_MESSAGE, "cant_save_to_personal_error_message"),
    ),
}
_NOT_ALLOWED = (
    (CROSS_PROFILE_NOT_ALLOWED_TITLE, "cross_profile_action_not_allowed_title"),
    (CROSS_PROFILE_NOT_ALLOWED_MESSAGE, "cross_profile_action_not_allowed_message"),
)


def resolve_body(event: Event, context: CapabilityContext, env: StatusEnvironment) -> Message:
    """Return the body message for *event*, independent of the header channel.

    Order: cross-profile > other exception > authentication > empty results.
    """
    if event.has_cross_profile_exception:
        exception = event.exception
        logger.info("cross-profile empty state: %s", type(exception).__name__)
        if isinstance(exception, CrossProfileQuietModeException):
            return _quiet_mode_error(event, context, env, exception)
        if isinstance(exception, CrossProfileNoPermissionException):
            return _no_permission_error(event, context, env)
        return _not_allowed_error(context, env)
    if event.has_exception and not event.has_authentication_exception:
        return Message.shown(
            None, env.resources.get_string("query_error"), None, env.resources.get_drawable("hourglass")
        )
    if event.has_authentication_exception:
        return Message.shown(
            None, env.resources.get_string("cant_display_content"), None, env.resources.get_drawable("empty")
        )
    if event.result_count == 0:
        return _empty_message(event, env)
    return Message.cleared()


def _lower(label: str) -> str:
    return label.lower()


# ---------------------------------------------------------------------------
# Quiet mode
# ---------------------------------------------------------------------------

def _quiet_mode_error(
    event: Event,
    context: CapabilityContext,
    env: StatusEnvironment,
    exception: CrossProfileQuietModeException,
) -> Message:
    res = env.resources
    user_id = exception.user_id
    private_space = context.private_space_feature_enabled
    profile_label: Optional[str] = env.profile_labels.get(user_id) if private_space else None

    if private_space:
        title = res.get_string("profile_quiet_mode_error_title", profile_label) if profile_label else ""
    else:
        title = env.enterprise.resolve(WORK_PROFILE_OFF_ERROR_TITLE, "quiet_mode_error_title", context)

    button = None
    on_action: Optional[Callable[[], None]] = None
    if context.can_modify_quiet_mode:
        if private_space:
            button = (
                res.get_string("profile_quiet_mode_button", _lower(profile_label)) if profile_label else ""
            )
        else:
            button = env.enterprise.resolve(WORK_PROFILE_OFF_ENABLE_BUTTON, "quiet_mode_button", context)
        root = event.root

        def _request_disabled() -> None:
            env.actions.request_quiet_mode_disabled(root, user_id)

        on_action = _request_disabled

    return Message.shown(
        title,
        "",
        button,
        env.enterprise.resolve_icon(WORK_PROFILE_OFF_ICON, "work_off", context),
        layout=Layout.CROSS_PROFILE_ERROR,
        on_action=on_action,
    )


# ---------------------------------------------------------------------------
# No permission
# ---------------------------------------------------------------------------

def _no_permission_error(event: Event, context: CapabilityContext, env: StatusEnvironment) -> Message:
    if event.action in _ACCESS_ACTIONS:
        kind = "access"
    elif event.action == Action.CREATE:
        kind = "create"
    else:
        return _not_allowed_error(context, env)

    if context.private_space_feature_enabled:
        title = _private_space_title(kind, context, env)
        message = _private_space_message(kind, context, env)
    else:
        wording = _WORK_WORDING if context.current_actor_is_primary_profile else _PERSONAL_WORDING
        title_keys, message_keys = wording[kind]
        title = env.enterprise.resolve(*title_keys, context)
        message = env.enterprise.resolve(*message_keys, context)

    return Message.shown(
        title,
        message,
        None,
        env.resources.get_drawable("share_off"),
        layout=Layout.CROSS_PROFILE_ERROR,
    )


def _private_space_title(kind: str, context: CapabilityContext, env: StatusEnvironment) -> str:
    selected = context.selected_user_label
    if selected is None:
        return ""
    if kind == "access":
        return env.resources.get_string("cant_select_cross_profile_files_error_title", _lower(selected))
    return env.resources.get_string("cant_save_to_cross_profile_error_title", _lower(selected))


def _private_space_message(kind: str, context: CapabilityContext, env: StatusEnvironment) -> str:
    source = context.source_user_label
    selected = context.selected_user_label
    if source is None or selected is None:
        return ""
    if kind == "access":
        return env.resources.get_string(
            "cant_select_cross_profile_files_error_message", _lower(selected), _lower(source)
        )
    return env.resources.get_string(
        "cant_save_to_cross_profile_error_message", _lower(source), _lower(selected)
    )


def _not_allowed_error(context: CapabilityContext, env: StatusEnvironment) -> Message:
    title_keys, message_keys = _NOT_ALLOWED
    return Message.shown(
        env.enterprise.resolve(*title_keys, context),
        env.enterprise.resolve(*message_keys, context),
        None,
        env.resources.get_drawable("share_off"),
        layout=Layout.CROSS_PROFILE_ERROR,
    )


# ---------------------------------------------------------------------------
# Empty results
# ---------------------------------------------------------------------------

def _empty_message(event: Event, env: StatusEnvironment) -> Message:
    res = env.resources
    if event.search_mode:
        body = res.get_string("no_results", event.current_root_title)
    else:
        body = res.get_string("empty")
    return Message.shown(None, body, None, res.get_drawable("empty"))
