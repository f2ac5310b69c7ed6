"""Tests for the view helpers that carry state: stylesheet, scroll driver and link opener."""

from core.constants import SECTION_NAMES
from core.layout import LayoutMode, media_query
from core.navigation import Anchor, Navigator, SectionRegistry, anchors_for, ease_in_out
from core.theme import PALETTES, ThemeController, ThemeMode
from view.opener import BrowserLinkOpener, LinkRequest, build_open_script
from view.scroll import BrowserScrollDriver, ScrollRequest, build_scroll_script
from view.styles import StyleSheet, build_stylesheet


class TestStyleSheet:
    def test_palette_colours_in_css(self) -> None:
        css = build_stylesheet(PALETTES[ThemeMode.DARK])
        assert "#121212" in css
        assert "#1E1E1E" in css

    def test_one_media_block_per_layout_mode(self) -> None:
        css = build_stylesheet(PALETTES[ThemeMode.LIGHT])
        for mode in LayoutMode:
            assert f"@media {media_query(mode)}" in css
        assert "repeat(1, minmax(0, 1fr))" in css
        assert "repeat(2, minmax(0, 1fr))" in css
        assert "repeat(3, minmax(0, 1fr))" in css

    def test_follows_theme_until_detached(self) -> None:
        theme = ThemeController(ThemeMode.DARK)
        sheet = StyleSheet(theme.mode).attach(theme)

        theme.toggle()
        assert "#FFFFFF" in sheet.css and "#009688" in sheet.css

        sheet.detach()
        assert theme.observer_count == 0
        theme.toggle()
        assert "#009688" in sheet.css

    def test_reattach_does_not_leak_observers(self) -> None:
        theme = ThemeController()
        sheet = StyleSheet(theme.mode)
        sheet.attach(theme)
        sheet.attach(theme)
        assert theme.observer_count == 1


class TestBrowserScrollDriver:
    def make(self):
        rendered: list = []
        driver = BrowserScrollDriver(render=lambda body, height: rendered.append((body, height)))
        navigator = Navigator(SectionRegistry(anchors_for(SECTION_NAMES)), driver, duration=0.6)
        return driver, navigator, rendered

    def test_request_becomes_pending(self) -> None:
        driver, navigator, _ = self.make()

        navigator.scroll_to("Projects")

        assert driver.pending == ScrollRequest(key="section-projects", duration_ms=600, seq=1)

    def test_latest_request_replaces_pending(self) -> None:
        driver, navigator, rendered = self.make()

        navigator.scroll_to("Projects")
        navigator.scroll_to("Contact")
        assert driver.flush() is True

        assert len(rendered) == 1
        body, height = rendered[0]
        assert '"section-contact"' in body
        assert "section-projects" not in body
        assert height == 0

    def test_flush_without_request_renders_nothing(self) -> None:
        driver, _, rendered = self.make()
        assert driver.flush() is False
        assert rendered == []

    def test_flush_clears_pending(self) -> None:
        driver, navigator, rendered = self.make()
        navigator.scroll_to("Home")
        driver.flush()
        driver.flush()
        assert len(rendered) == 1

    def test_cancel_drops_pending(self) -> None:
        driver, _, _ = self.make()
        driver.start(Anchor("section-home"), 0.6, ease_in_out)
        driver.cancel()
        assert driver.pending is None

    def test_missing_target_keeps_previous_request(self) -> None:
        driver, navigator, _ = self.make()
        navigator.scroll_to("Skills")
        assert navigator.request("NonexistentSection") is False
        assert driver.pending.key == "section-skills"

    def test_script_cancels_running_animation(self) -> None:
        script = build_scroll_script(ScrollRequest(key="section-about", duration_ms=600, seq=3))
        assert "cancelAnimationFrame" in script
        assert "const duration = 600;" in script
        assert "scroll request 3" in script

    def test_flush_records_last_request(self) -> None:
        driver, navigator, _ = self.make()
        navigator.scroll_to("About")
        driver.flush()
        assert driver.last_flushed.key == "section-about"


class TestBrowserLinkOpener:
    def make(self):
        rendered: list = []
        return BrowserLinkOpener(render=lambda body, height: rendered.append((body, height))), rendered

    def test_queues_and_reports_success(self) -> None:
        opener, rendered = self.make()

        assert opener("mailto:me@example.com?subject=Hiring%20Inquiry", "Failed to open link") is True

        assert opener.pending == [LinkRequest("mailto:me@example.com?subject=Hiring%20Inquiry", "Failed to open link", 1)]
        assert rendered == []

    def test_flush_opens_in_visitor_browser(self) -> None:
        opener, rendered = self.make()
        opener("https://github.com/AhmadAli3234", "Failed to open link")
        opener("https://example.com/cv", "Failed to open CV. Please try again.")

        assert opener.flush() is True

        assert len(rendered) == 1
        body, height = rendered[0]
        assert height == 0
        assert 'win.open(request.uri, "_blank")' in body
        assert '"uri": "https://github.com/AhmadAli3234"' in body
        assert '"message": "Failed to open CV. Please try again."' in body
        assert opener.pending == []
        assert [r.seq for r in opener.last_flushed] == [1, 2]

    def test_flush_without_request_renders_nothing(self) -> None:
        opener, rendered = self.make()
        assert opener.flush() is False
        assert rendered == []

    def test_script_notifies_when_browser_refuses(self) -> None:
        script = build_open_script([LinkRequest("https://example.com", "Failed to open link", 4)])
        assert "notify(request.message)" in script
        assert "link request 4" in script
