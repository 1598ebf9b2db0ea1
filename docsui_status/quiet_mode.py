# quiet_mode.py
"""Whether the current actor may turn a paused profile back on."""

from __future__ import annotations

import logging
from typing import Optional

from .context import ShowInQuietMode, UserPropertyLookup
from .models import UserId


logger = logging.getLogger("docsui_status.quiet_mode")


def can_modify_quiet_mode(
    selected_user: UserId,
    *,
    permission_granted: bool,
    private_space_enabled: bool,
    is_foreground_user: bool,
    user_manager: Optional[UserPropertyLookup],
) -> bool:
    """Quiet-mode eligibility for *selected_user*.

    Without the private-space feature this is the raw permission check. With
    it, the actor must be the foreground user, a user manager must be
    available, and the selected profile must show as paused in quiet mode;
    the permission is only consulted after the property lookup.
    """
    if not private_space_enabled:
        return permission_granted

    # Quiet mode cannot be modified when launched from a non-foreground user
    if not is_foreground_user:
        return False

    if user_manager is None:
        logger.error("can not obtain user manager")
        return False

    properties = user_manager.get_user_properties(selected_user)
    return properties.show_in_quiet_mode == ShowInQuietMode.PAUSED and permission_granted
