# context.py
"""Per-invocation capability values and the collaborator contracts the resolvers consume."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field

from .config import ENTERPRISE_STRINGS_SUPPORTED, PRIVATE_SPACE_IN_DOCSUI_ENABLED, cfg_get
from .models import RootInfo, UserId
from .resources import IconRef


class CapabilityContext(BaseModel):
    """Booleans and labels assembled once by the caller; no logic of its own."""

    model_config = ConfigDict(frozen=True)

    can_modify_quiet_mode: bool = Field(default=False, description="Result of the quiet-mode eligibility check.")
    private_space_feature_enabled: bool = Field(
        default=PRIVATE_SPACE_IN_DOCSUI_ENABLED,
        description="Private-space wording and eligibility rules are active.",
    )
    source_user_label: Optional[str] = Field(default=None, description="Label of the profile the picker was launched from.")
    selected_user_label: Optional[str] = Field(default=None, description="Label of the profile currently being browsed.")
    current_actor_is_primary_profile: bool = Field(default=True, description="Current actor is the system/primary profile.")
    enterprise_strings_supported: bool = Field(
        default=ENTERPRISE_STRINGS_SUPPORTED,
        description="Device-policy string/icon overrides may be consulted.",
    )

    @classmethod
    def from_config(cls, **overrides: Any) -> "CapabilityContext":
        """Seed the config-driven flags from the currently loaded config, then apply *overrides*."""
        values: Dict[str, Any] = {
            "private_space_feature_enabled": bool(cfg_get("features.private_space_in_docsui", True)),
            "enterprise_strings_supported": bool(cfg_get("enterprise.strings_supported", True)),
        }
        values.update(overrides)
        return cls(**values)


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

class ShowInQuietMode(Enum):
    PAUSED = 0
    HIDDEN = 1
    DEFAULT = 2


class UserProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    show_in_quiet_mode: ShowInQuietMode = ShowInQuietMode.DEFAULT


class UserPropertyLookup(Protocol):
    def get_user_properties(self, user_id: UserId) -> UserProperties: ...


class EnterpriseOverrideProvider(Protocol):
    def get_string(self, key: str, fallback: Callable[[], str]) -> str: ...

    def get_drawable(self, key: str, style: str, fallback: Callable[[], IconRef]) -> IconRef: ...


class ActionHandler(Protocol):
    def start_authentication(self, user_action: Any) -> None: ...

    def show_create_directory_dialog(self) -> None: ...

    def request_quiet_mode_disabled(self, root: RootInfo, user_id: UserId) -> None: ...


AppNameLookup = Callable[[UserId, str], str]
