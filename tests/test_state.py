"""Tests for core.state: the session-scoped AppState actions."""

from core.constants import SECTION_NAMES
from core.navigation import anchors_for
from core.state import AppState
from core.theme import ThemeMode
from view.opener import BrowserLinkOpener, LinkRequest
from view.scroll import BrowserScrollDriver


def make_state(opener=lambda uri, message: True, **kwargs) -> AppState:
    driver = BrowserScrollDriver(render=lambda body, height: None)
    return AppState.create(driver, opener, **kwargs)


class TestAppState:
    def test_theme_seeded(self) -> None:
        state = make_state(theme=ThemeMode.LIGHT)
        assert state.theme.mode is ThemeMode.LIGHT

        state.toggle_theme()
        assert state.theme.mode is ThemeMode.DARK

    def test_navigator_shares_registry(self) -> None:
        state = make_state()
        assert state.go_to("About") is False

        state.registry.sync(anchors_for(SECTION_NAMES))
        assert state.go_to("About") is True
        assert state.navigator.driver.pending.key == "section-about"

    def test_initial_section_consumed_once(self) -> None:
        state = make_state(initial_section="Skills")
        assert state.consume_initial_section() == "Skills"
        assert state.consume_initial_section() is None

    def test_blank_initial_section_ignored(self) -> None:
        assert make_state(initial_section="").consume_initial_section() is None


class TestOpenLink:
    def test_success_queues_nothing(self) -> None:
        state = make_state()
        assert state.open_link("https://github.com/AhmadAli3234") is True
        assert state.drain_notices() == []

    def test_failure_queues_notice(self) -> None:
        state = make_state(opener=lambda uri, message: False)

        assert state.open_link("https://example.com", "Failed to open CV. Please try again.") is False

        assert state.drain_notices() == ["Failed to open CV. Please try again."]
        assert state.drain_notices() == []

    def test_failure_default_message(self) -> None:
        state = make_state(opener=lambda uri, message: False)
        state.open_link("mailto:me@example.com")
        assert state.notices == ["Failed to open link"]

    def test_browser_opener_does_not_depend_on_a_server_browser(self, monkeypatch) -> None:
        for name in ("DISPLAY", "WAYLAND_DISPLAY", "BROWSER"):
            monkeypatch.delenv(name, raising=False)
        opener = BrowserLinkOpener(render=lambda body, height: None)
        state = make_state(opener=opener)

        assert state.open_link("https://github.com/AhmadAli3234") is True
        assert state.open_link("https://example.com/cv", "Failed to open CV. Please try again.") is True

        assert state.drain_notices() == []
        assert opener.pending == [
            LinkRequest("https://github.com/AhmadAli3234", "Failed to open link", 1),
            LinkRequest("https://example.com/cv", "Failed to open CV. Please try again.", 2),
        ]

    def test_empty_uri_notifies_without_queueing(self) -> None:
        opener = BrowserLinkOpener(render=lambda body, height: None)
        state = make_state(opener=opener)

        assert state.open_link("") is False
        assert state.drain_notices() == ["Failed to open link"]
        assert opener.pending == []
