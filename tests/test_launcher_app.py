"""Pilot-based tests for the launcher TUI."""

from __future__ import annotations

import threading

import pytest
from textual.screen import Screen
from textual.widgets import Static

from shuttle.exceptions import AggregationError
from shuttle.matchers import SimpleMatcher
from shuttle.ui.launcher_app import LauncherScreen, ShuttleApp, render_rows
from shuttle.ui.session import SearchSession, SessionStatus

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _static_text(app: ShuttleApp, selector: str) -> str:
    return str(app.screen.query_one(selector, Static).content)


async def _wait_loaded(app: ShuttleApp, pilot) -> None:
    await app.workers.wait_for_complete()
    await pilot.pause()


# ---------------------------------------------------------------------------
# Tests: Loading
# ---------------------------------------------------------------------------


class TestLauncherLoading:
    @pytest.mark.asyncio
    async def test_shows_loading_until_items_arrive(self, example_items) -> None:
        release = threading.Event()

        def loader():
            release.wait(5)
            return example_items

        app = ShuttleApp(SimpleMatcher(), loader)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.launcher.session.status == SessionStatus.LOADING
            assert "Loading items..." in _static_text(app, "#status-line")

            release.set()
            await _wait_loaded(app, pilot)
            assert app.launcher.session.status == SessionStatus.LOADED
            assert "3 items" in _static_text(app, "#status-line")
            assert "alpha/one" in _static_text(app, "#item-list")

    @pytest.mark.asyncio
    async def test_load_failure_shown_in_status(self) -> None:
        def loader():
            raise AggregationError("Loading items failed", provider="GitHub acme")

        app = ShuttleApp(SimpleMatcher(), loader)
        async with app.run_test() as pilot:
            await _wait_loaded(app, pilot)
            assert app.launcher.session.status == SessionStatus.FAILED
            assert "Error: Loading items failed" in _static_text(app, "#status-line")

    @pytest.mark.asyncio
    async def test_quit_before_load_finishes(self, example_items) -> None:
        release = threading.Event()
        delivered = threading.Event()

        def loader():
            release.wait(5)
            delivered.set()
            return example_items

        app = ShuttleApp(SimpleMatcher(), loader)
        try:
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.launcher
                assert screen.session.status == SessionStatus.LOADING
                await pilot.press("escape")
                release.set()
        finally:
            release.set()

        assert app.return_value is None
        assert delivered.wait(5)
        assert screen.session.status != SessionStatus.FAILED

    def test_hand_off_skipped_when_detached(self) -> None:
        screen = LauncherScreen(SimpleMatcher(), lambda: [])
        calls = []
        screen._hand_off(calls.append, "items")
        assert calls == []


# ---------------------------------------------------------------------------
# Tests: Keys
# ---------------------------------------------------------------------------


class TestLauncherKeys:
    @pytest.mark.asyncio
    async def test_typing_filters(self, example_items) -> None:
        app = ShuttleApp(SimpleMatcher(), lambda: example_items)
        async with app.run_test() as pilot:
            await _wait_loaded(app, pilot)
            await pilot.press("b", "e")
            await pilot.pause()

            snapshot = app.launcher.session.snapshot()
            assert snapshot.query == "be"
            assert [item.label for item in snapshot.filtered] == ["beta/two"]
            assert "> be" in _static_text(app, "#query-line")
            assert "1/3 items" in _static_text(app, "#status-line")

    @pytest.mark.asyncio
    async def test_editing_keys(self, example_items) -> None:
        app = ShuttleApp(SimpleMatcher(), lambda: example_items)
        async with app.run_test() as pilot:
            await _wait_loaded(app, pilot)
            await pilot.press("a", "l", "space", "t", "w")
            await pilot.pause()
            assert app.launcher.session.query == "al tw"

            await pilot.press("backspace")
            await pilot.pause()
            assert app.launcher.session.query == "al t"

            await pilot.press("ctrl+w")
            await pilot.pause()
            assert app.launcher.session.query == "al "

            await pilot.press("ctrl+u")
            await pilot.pause()
            assert app.launcher.session.query == ""
            assert len(app.launcher.session.snapshot().filtered) == 3

    @pytest.mark.asyncio
    async def test_enter_exits_with_selected_value(self, example_items) -> None:
        app = ShuttleApp(SimpleMatcher(), lambda: example_items)
        async with app.run_test() as pilot:
            await _wait_loaded(app, pilot)
            await pilot.press("down")
            await pilot.press("enter")

        assert app.return_value == example_items[1].value

    @pytest.mark.asyncio
    async def test_up_wraps_to_last(self, example_items) -> None:
        app = ShuttleApp(SimpleMatcher(), lambda: example_items)
        async with app.run_test() as pilot:
            await _wait_loaded(app, pilot)
            await pilot.press("up")
            await pilot.pause()
            assert app.launcher.session.snapshot().selected == 2
            await pilot.press("enter")

        assert app.return_value == example_items[2].value

    @pytest.mark.asyncio
    async def test_escape_exits_without_value(self, example_items) -> None:
        app = ShuttleApp(SimpleMatcher(), lambda: example_items)
        async with app.run_test() as pilot:
            await _wait_loaded(app, pilot)
            await pilot.press("escape")

        assert app.return_value is None

    @pytest.mark.asyncio
    async def test_enter_with_no_matches_keeps_running(self, example_items) -> None:
        app = ShuttleApp(SimpleMatcher(), lambda: example_items)
        async with app.run_test() as pilot:
            await _wait_loaded(app, pilot)
            await pilot.press("z", "z", "enter")
            await pilot.pause()
            assert app.is_running
            assert "No matching items" in _static_text(app, "#item-list")


# ---------------------------------------------------------------------------
# Tests: Rendering
# ---------------------------------------------------------------------------


class TestRenderRows:
    def test_marks_selection(self, example_items) -> None:
        session = SearchSession(SimpleMatcher())
        session.load(example_items)
        lines = render_rows(session.snapshot()).plain.splitlines()
        assert lines == ["▶ alpha/one", "  beta/two", "  alpha/three"]

    def test_empty_while_loading(self) -> None:
        session = SearchSession(SimpleMatcher())
        assert render_rows(session.snapshot()).plain == ""


class TestLauncherProperty:
    @pytest.mark.asyncio
    async def test_raises_when_other_screen_active(self, example_items) -> None:
        app = ShuttleApp(SimpleMatcher(), lambda: example_items)
        async with app.run_test() as pilot:
            await _wait_loaded(app, pilot)
            await app.push_screen(Screen())
            await pilot.pause()
            with pytest.raises(RuntimeError, match="not active"):
                app.launcher
