from docsui_status.context import ShowInQuietMode, UserProperties
from docsui_status.quiet_mode import can_modify_quiet_mode
from docsui_status.models import UserId

from conftest import FakeUserManager


WORK = UserId(10)


class TestQuietModeEligibility:
    def test_feature_disabled_uses_permission_only(self):
        assert can_modify_quiet_mode(
            WORK, permission_granted=True, private_space_enabled=False,
            is_foreground_user=False, user_manager=None,
        ) is True
        assert can_modify_quiet_mode(
            WORK, permission_granted=False, private_space_enabled=False,
            is_foreground_user=True, user_manager=FakeUserManager(),
        ) is False

    def test_not_foreground_is_never_eligible(self, paused_work_manager):
        assert can_modify_quiet_mode(
            WORK, permission_granted=True, private_space_enabled=True,
            is_foreground_user=False, user_manager=paused_work_manager,
        ) is False
        assert paused_work_manager.lookups == []

    def test_missing_user_manager_is_ineligible(self, caplog):
        with caplog.at_level("ERROR", logger="docsui_status.quiet_mode"):
            result = can_modify_quiet_mode(
                WORK, permission_granted=True, private_space_enabled=True,
                is_foreground_user=True, user_manager=None,
            )
        assert result is False
        assert "user manager" in caplog.text

    def test_paused_profile_with_permission(self, paused_work_manager):
        assert can_modify_quiet_mode(
            WORK, permission_granted=True, private_space_enabled=True,
            is_foreground_user=True, user_manager=paused_work_manager,
        ) is True
        assert paused_work_manager.lookups == [WORK]

    def test_paused_profile_without_permission(self, paused_work_manager):
        assert can_modify_quiet_mode(
            WORK, permission_granted=False, private_space_enabled=True,
            is_foreground_user=True, user_manager=paused_work_manager,
        ) is False

    def test_hidden_profile_is_ineligible(self):
        manager = FakeUserManager({WORK: UserProperties(show_in_quiet_mode=ShowInQuietMode.HIDDEN)})
        assert can_modify_quiet_mode(
            WORK, permission_granted=True, private_space_enabled=True,
            is_foreground_user=True, user_manager=manager,
        ) is False
