from functools import partial

import pytest

from docsui_status.commands import DebugCommandRouter, handle_gesture_scale, handle_quick_viewer
from docsui_status.debug_flags import DebugFlags, get_debug_flags
from docsui_status.helpers import is_debug_command, parse_bool, strip_debug_prefix


@pytest.fixture
def router(flags):
    return DebugCommandRouter.default(flags, debug_build=True)


class TestPrefixParsing:
    def test_is_debug_command(self):
        assert is_debug_command("debug:qv") is True
        assert is_debug_command("debug:") is False
        assert is_debug_command("hello") is False
        assert is_debug_command(" debug:qv") is False
        assert is_debug_command("") is False

    def test_strip_prefix(self):
        assert strip_debug_prefix("debug:gs true") == "gs true"

    @pytest.mark.parametrize("text, expected", [("true", True), ("TRUE", True), ("True", True), ("false", False), ("yes", False)])
    def test_parse_bool(self, text, expected):
        assert parse_bool(text) is expected


class TestBuiltinCommands:
    def test_qv_sets_override(self, router, flags):
        assert router.route("debug:qv foo") is True
        assert flags.quick_viewer_override == "foo"

    def test_qv_without_value_is_unrecognized(self, router, flags, caplog):
        with caplog.at_level("WARNING", logger="docsui_status.commands.debug"):
            assert router.route("debug:qv") is True
        assert flags == DebugFlags()
        assert "Invalid command structure: qv" in caplog.text
        assert "Unrecognized debug command: debug:qv" in caplog.text

    def test_qv_with_extra_args_is_unrecognized(self, router, flags):
        assert router.route("debug:qv a b") is True
        assert flags.quick_viewer_override is None

    def test_deqv_clears_override(self, router, flags):
        flags.quick_viewer_override = "com.example.viewer"
        assert router.route("debug:deqv") is True
        assert flags.quick_viewer_override is None

    def test_gs_enables(self, router, flags):
        assert router.route("debug:gs") is True
        assert flags.gesture_scale_enabled is True

    def test_gs_false(self, router, flags):
        flags.gesture_scale_enabled = True
        assert router.route("debug:gs false") is True
        assert flags.gesture_scale_enabled is False

    def test_gs_bool_is_case_insensitive(self, router, flags):
        assert router.route("debug:gs TRUE") is True
        assert flags.gesture_scale_enabled is True

    def test_gs_too_many_args_falls_through(self, router, flags, caplog):
        with caplog.at_level("WARNING", logger="docsui_status.commands.debug"):
            assert router.route("debug:gs true now") is True
        assert flags.gesture_scale_enabled is False
        assert "Invalid command structure: gs true now" in caplog.text

    def test_runs_of_whitespace_split(self, router, flags):
        assert router.route("debug:qv    spaced.viewer") is True
        assert flags.quick_viewer_override == "spaced.viewer"


class TestRouting:
    def test_no_prefix_is_not_routed(self, router, flags):
        assert router.route("hello") is False
        assert flags == DebugFlags()

    def test_bare_prefix_is_not_routed(self, router):
        assert router.route("debug:") is False

    def test_whitespace_only_is_not_routed(self, router):
        assert router.route("debug:   ") is False

    def test_unknown_keyword_is_consumed(self, router, flags, caplog):
        with caplog.at_level("WARNING", logger="docsui_status.commands.debug"):
            assert router.route("debug:nope") is True
        assert flags == DebugFlags()
        assert "Unrecognized debug command" in caplog.text

    def test_release_build_registers_nothing(self, flags):
        router = DebugCommandRouter.default(flags, debug_build=False)
        assert router.handlers == []
        assert router.route("debug:qv foo") is True
        assert flags.quick_viewer_override is None

    def test_first_match_stops_chain(self, flags):
        seen = []

        def first(tokens):
            seen.append(("first", tokens))
            return True

        def second(tokens):
            seen.append(("second", tokens))
            return True

        router = DebugCommandRouter(first, second, flags=flags)
        assert router.route("debug:anything at all") is True
        assert seen == [("first", ["anything", "at", "all"])]

    def test_handlers_tried_in_order(self, flags):
        order = []

        def declines(tokens):
            order.append("declines")
            return False

        router = DebugCommandRouter(declines, partial(handle_quick_viewer, flags=flags), flags=flags)
        router.add_handler(partial(handle_gesture_scale, flags=flags))
        assert router.route("debug:gs") is True
        assert order == ["declines"]
        assert flags.gesture_scale_enabled is True

    def test_default_flags_are_process_wide(self):
        router = DebugCommandRouter()
        assert router.flags is get_debug_flags()
        assert get_debug_flags() is get_debug_flags()
