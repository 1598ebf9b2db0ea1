# environment.py
"""Collaborators shared by the header and inflate resolvers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from .config import REMOTE_ACTIONS_ENABLED
from .context import ActionHandler, AppNameLookup
from .enterprise import EnterpriseStringResolver, load_override_provider
from .models import UserId
from .resources import Resources


@dataclass
class StatusEnvironment:
    resources: Resources
    actions: ActionHandler
    app_name_lookup: AppNameLookup
    enterprise: EnterpriseStringResolver
    # Precomputed by the caller; used to name a paused profile.
    profile_labels: Dict[UserId, str] = field(default_factory=dict)
    remote_actions_enabled: bool = REMOTE_ACTIONS_ENABLED

    @classmethod
    def from_config(
        cls,
        *,
        actions: ActionHandler,
        app_name_lookup: AppNameLookup,
        profile_labels: Optional[Dict[UserId, str]] = None,
    ) -> "StatusEnvironment":
        resources = Resources.from_config()
        return cls(
            resources=resources,
            actions=actions,
            app_name_lookup=app_name_lookup,
            enterprise=EnterpriseStringResolver(resources, load_override_provider()),
            profile_labels=dict(profile_labels or {}),
        )
