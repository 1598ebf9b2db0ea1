# header_message.py
"""Header channel: the list-level banner above the results."""

from __future__ import annotations

import logging
from typing import cast

from .context import CapabilityContext
from .environment import StatusEnvironment
from .models import Action, AuthenticationRequired, Event, Message


logger = logging.getLogger("docsui_status.header")


def resolve_header(event: Event, context: CapabilityContext, env: StatusEnvironment) -> Message:
    """Return the header message for *event*; first matching rule wins.

    Order: authentication > error > info > blocked-from-tree. No match
    returns a cleared message.
    """
    res = env.resources

    # Sign-in prompt preempts provider error/info
    if event.has_authentication_exception:
        return _authentication_header(event, env)
    if event.error is not None:
        return Message.shown(None, event.error, None, res.get_drawable("ic_dialog_alert"))
    if event.info is not None:
        return Message.shown(None, event.info, None, res.get_drawable("ic_dialog_info"))
    if (
        event.action == Action.OPEN_TREE
        and event.is_blocked_from_tree
        and event.restrict_scope_storage_enabled
    ):
        return _blocked_from_tree_header(env)
    return Message.cleared()


def _authentication_header(event: Event, env: StatusEnvironment) -> Message:
    if not env.remote_actions_enabled:
        logger.warning("authentication header requested with remote actions disabled")

    exception = cast(AuthenticationRequired, event.exception)
    root = event.root
    app_name = env.app_name_lookup(root.user_id, root.authority)
    res = env.resources

    def _start_authentication() -> None:
        env.actions.start_authentication(exception.user_action)

    return Message.shown(
        None,
        res.get_string("authentication_required", app_name),
        res.get_string("sign_in"),
        res.get_drawable("ic_dialog_info"),
        on_action=_start_authentication,
    )


def _blocked_from_tree_header(env: StatusEnvironment) -> Message:
    res = env.resources
    return Message.shown(
        res.get_string("directory_blocked_header_title"),
        res.get_string("directory_blocked_header_subtitle"),
        res.get_string("create_new_folder_button"),
        res.get_drawable("ic_dialog_info"),
        should_keep=True,
        on_action=env.actions.show_create_directory_dialog,
    )
