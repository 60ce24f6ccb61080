"""Tests for breadcrumbs, the dropdown state machine and the scroll lock."""

import pytest

from intcenter.services.navigation import MenuEvent, MenuState, ScrollLock, get_breadcrumbs, transition

# ===================================================================
# Breadcrumbs
# ===================================================================


class TestBreadcrumbs:
    def test_root(self) -> None:
        assert [(b.label, b.href) for b in get_breadcrumbs("/")] == [("Home", "/")]

    def test_nested_path(self) -> None:
        crumbs = get_breadcrumbs("/services/prp-therapy/")

        assert [(b.label, b.href) for b in crumbs] == [
            ("Home", "/"),
            ("Services", "/services"),
            ("Prp Therapy", "/services/prp-therapy"),
        ]

    def test_repeated_slashes_ignored(self) -> None:
        crumbs = get_breadcrumbs("//company//patient-resources")
        assert [b.href for b in crumbs] == ["/", "/company", "/company/patient-resources"]


# ===================================================================
# Dropdown state machine
# ===================================================================


class TestMenuTransitions:
    def test_click_opens(self) -> None:
        state = transition(MenuState.closed(), MenuEvent.CLICK, "primary-care")
        assert state == MenuState.opened("primary-care")
        assert state.is_open

    def test_click_same_category_toggles_closed(self) -> None:
        state = transition(MenuState.opened("primary-care"), MenuEvent.CLICK, "primary-care")
        assert state == MenuState.closed()
        assert not state.is_open

    def test_click_other_category_switches(self) -> None:
        state = transition(MenuState.opened("primary-care"), MenuEvent.CLICK, "diagnostics")
        assert state.open_for == "diagnostics"

    def test_hover_opens_without_toggling(self) -> None:
        state = transition(MenuState.opened("diagnostics"), MenuEvent.HOVER, "diagnostics")
        assert state.open_for == "diagnostics"

    @pytest.mark.parametrize(
        "event", [MenuEvent.HOVER_LEAVE_TIMEOUT, MenuEvent.ESCAPE, MenuEvent.OUTSIDE_CLICK]
    )
    def test_dismiss_events_close(self, event: MenuEvent) -> None:
        assert transition(MenuState.opened("diagnostics"), event) == MenuState.closed()
        assert transition(MenuState.closed(), event) == MenuState.closed()

    @pytest.mark.parametrize("event", [MenuEvent.CLICK, MenuEvent.HOVER])
    def test_targeted_event_needs_category(self, event: MenuEvent) -> None:
        with pytest.raises(ValueError):
            transition(MenuState.closed(), event)


# ===================================================================
# Scroll lock
# ===================================================================


class TestScrollLock:
    def test_context_manager_restores_previous_value(self) -> None:
        style = {"overflow": "auto", "color": "red"}

        with ScrollLock(style) as lock:
            assert lock.held
            assert style["overflow"] == "hidden"

        assert style == {"overflow": "auto", "color": "red"}
        assert not lock.held

    def test_restores_absent_value(self) -> None:
        style: dict[str, str] = {}

        with ScrollLock(style):
            assert style == {"overflow": "hidden"}

        assert style == {}

    def test_release_restores_exactly_once(self) -> None:
        style = {"overflow": "scroll"}
        lock = ScrollLock(style).acquire()
        lock.release()

        style["overflow"] = "visible"
        lock.release()

        assert style["overflow"] == "visible"

    def test_double_acquire_keeps_original_value(self) -> None:
        style = {"overflow": "auto"}
        lock = ScrollLock(style)

        lock.acquire()
        lock.acquire()
        lock.release()

        assert style["overflow"] == "auto"
