"""Shared fakes for the status resolver tests.

Run with: python -m pytest tests/ -v
"""
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from docsui_status.context import CapabilityContext, ShowInQuietMode, UserProperties
from docsui_status.debug_flags import DebugFlags
from docsui_status.enterprise import EnterpriseStringResolver, StaticOverrideProvider
from docsui_status.environment import StatusEnvironment
from docsui_status.models import Action, Event, RootInfo, UserId
from docsui_status.resources import Resources


PERSONAL = UserId(0)
WORK = UserId(10)
PRIVATE = UserId(11)


class RecordingActions:
    """Action handler that records every callback it receives."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []

    def start_authentication(self, user_action: Any) -> None:
        self.calls.append(("start_authentication", user_action))

    def show_create_directory_dialog(self) -> None:
        self.calls.append(("show_create_directory_dialog", None))

    def request_quiet_mode_disabled(self, root: RootInfo, user_id: UserId) -> None:
        self.calls.append(("request_quiet_mode_disabled", (root, user_id)))


class FakeUserManager:
    def __init__(self, properties: Optional[Dict[UserId, UserProperties]] = None) -> None:
        self.properties = properties or {}
        self.lookups: List[UserId] = []

    def get_user_properties(self, user_id: UserId) -> UserProperties:
        self.lookups.append(user_id)
        return self.properties.get(user_id, UserProperties())


@pytest.fixture
def resources():
    return Resources.from_config()


@pytest.fixture
def actions():
    return RecordingActions()


@pytest.fixture
def app_names():
    lookups = []

    def _lookup(user_id: UserId, authority: str) -> str:
        lookups.append((user_id, authority))
        return "Cloud Drive"

    _lookup.lookups = lookups
    return _lookup


@pytest.fixture
def env(resources, actions, app_names):
    return StatusEnvironment(
        resources=resources,
        actions=actions,
        app_name_lookup=app_names,
        enterprise=EnterpriseStringResolver(resources, None),
        profile_labels={PERSONAL: "Personal", WORK: "Work", PRIVATE: "Private"},
    )


@pytest.fixture
def overrides():
    return StaticOverrideProvider(
        strings={"DocumentsUi.CANT_SAVE_TO_WORK_TITLE": "Saving to work is blocked by policy"},
        drawables={"WORK_PROFILE_OFF_ICON": "policy_work_off"},
    )


@pytest.fixture
def root():
    return RootInfo(authority="com.example.docs", user_id=PERSONAL, title="Downloads")


@pytest.fixture
def make_event(root):
    def _make(**kw) -> Event:
        kw.setdefault("root", root)
        kw.setdefault("action", Action.OPEN)
        kw.setdefault("result_count", 3)
        return Event(**kw)

    return _make


@pytest.fixture
def context():
    return CapabilityContext(
        private_space_feature_enabled=False,
        enterprise_strings_supported=False,
    )


@pytest.fixture
def flags():
    return DebugFlags()


@pytest.fixture
def paused_work_manager():
    return FakeUserManager({WORK: UserProperties(show_in_quiet_mode=ShowInQuietMode.PAUSED)})
