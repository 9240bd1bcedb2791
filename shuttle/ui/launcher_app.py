"""
Launcher TUI - query line, item list and status line.

The screen owns a SearchSession and translates keys into session commands.
Items are loaded in a thread worker; the result is handed to the session on
the UI thread. Activating an item dismisses the screen with its value and the
app exits with that value, leaving the actual launch to the caller.
"""

import logging
from typing import Callable, Optional, Sequence

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Static

from shuttle.config.constants import MAX_VISIBLE_ROWS, SCROLL_CONTEXT_ROWS
from shuttle.matchers import Matcher
from shuttle.models import Item

from .commands import (
    Activate,
    AppendText,
    Backspace,
    Clear,
    Command,
    DeleteWord,
    MoveDown,
    MoveUp,
    Quit,
)
from .session import SearchSession, SessionSnapshot, SessionStatus

logger = logging.getLogger(__name__)

ItemLoader = Callable[[], Sequence[Item]]


def render_rows(snapshot: SessionSnapshot) -> Text:
    """Render the visible window of the filtered list, highlighting the selection."""
    text = Text(no_wrap=True, overflow="ellipsis")
    if snapshot.status != SessionStatus.LOADED:
        return text
    if not snapshot.filtered:
        text.append("No matching items", style="dim")
        return text

    start = max(0, snapshot.selected - SCROLL_CONTEXT_ROWS)
    rows = snapshot.filtered[start:start + MAX_VISIBLE_ROWS]
    for offset, item in enumerate(rows):
        if offset:
            text.append("\n")
        if start + offset == snapshot.selected:
            text.append(f"▶ {item.label}", style="bold white")
        else:
            text.append(f"  {item.label}", style="grey62")
    return text


class LauncherScreen(Screen):
    """Full-screen search over the loaded items."""

    CSS = """
    #launcher-container {
        height: 100%;
        padding: 0 1;
    }

    #query-line {
        height: 1;
        color: $warning;
        text-style: bold;
    }

    #item-list {
        height: 1fr;
        border-top: solid $primary-darken-1;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("escape", "command('quit')", "Quit", show=False, priority=True),
        Binding("enter", "command('activate')", "Open", show=False, priority=True),
        Binding("up", "command('move_up')", "Up", show=False, priority=True),
        Binding("ctrl+p", "command('move_up')", "Up", show=False, priority=True),
        Binding("down", "command('move_down')", "Down", show=False, priority=True),
        Binding("ctrl+n", "command('move_down')", "Down", show=False, priority=True),
        Binding("backspace", "command('backspace')", "Delete", show=False, priority=True),
        Binding("ctrl+w", "command('delete_word')", "Delete word", show=False, priority=True),
        Binding("ctrl+u", "command('clear')", "Clear", show=False, priority=True),
    ]

    COMMANDS = {
        "quit": Quit(),
        "activate": Activate(),
        "move_up": MoveUp(),
        "move_down": MoveDown(),
        "backspace": Backspace(),
        "delete_word": DeleteWord(),
        "clear": Clear(),
    }

    def __init__(self, matcher: Matcher, loader: ItemLoader, **kwargs):
        super().__init__(**kwargs)
        self.loader = loader
        self.session = SearchSession(matcher, on_state_update=self._on_state_update)

    def compose(self) -> ComposeResult:
        with Vertical(id="launcher-container"):
            yield Static("> ", id="query-line")
            yield Static("", id="item-list")
            yield Static("Loading items...", id="status-line")

    def on_mount(self) -> None:
        self._render_snapshot(self.session.snapshot())
        self.run_worker(self._load_items, thread=True, exclusive=True, name="load-items")

    def _load_items(self) -> None:
        """Worker: run the load phase and hand the result to the session."""
        try:
            items = self.loader()
        except Exception as e:
            logger.error("Failed to load items: %s", e, exc_info=True)
            self._hand_off(self.session.fail, e)
            return
        self._hand_off(self.session.load, items)

    def _hand_off(self, callback: Callable[..., None], *args) -> None:
        """Run ``callback`` on the UI thread unless the screen has gone away."""
        if not self.is_attached:
            logger.debug("Launcher closed before loading finished")
            return
        try:
            self.app.call_from_thread(callback, *args)
        except RuntimeError as e:
            # The app can exit between the check above and the call
            logger.debug("Dropped load result after exit: %s", e)

    def _on_state_update(self, snapshot: SessionSnapshot) -> None:
        """Handle state updates from the session."""
        self._render_snapshot(snapshot)

    def _render_snapshot(self, snapshot: SessionSnapshot) -> None:
        query_line = Text("> ", style="bold")
        query_line.append(snapshot.query)
        self.query_one("#query-line", Static).update(query_line)
        self.query_one("#item-list", Static).update(render_rows(snapshot))
        self.query_one("#status-line", Static).update(
            Text("↑↓ Navigate │ Enter Open │ ^W Word │ ^U Clear │ Esc Quit │ ")
            + Text(snapshot.status_text)
        )

    def apply(self, command: Command) -> None:
        outcome = self.session.apply(command)
        if outcome.terminate:
            self.dismiss(outcome.activated)

    def action_command(self, name: str) -> None:
        self.apply(self.COMMANDS[name])

    def on_key(self, event: events.Key) -> None:
        """Typed characters extend the query."""
        if event.is_printable and event.character:
            event.stop()
            event.prevent_default()
            self.apply(AppendText(event.character))

    def on_paste(self, event: events.Paste) -> None:
        # Only the first line of a paste is meaningful as a query
        text = event.text.splitlines()[0] if event.text else ""
        if text:
            self.apply(AppendText(text))


class ShuttleApp(App[Optional[str]]):
    """Application shell; exits with the activated value (or None)."""

    TITLE = "shuttle"
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, matcher: Matcher, loader: ItemLoader, **kwargs):
        super().__init__(**kwargs)
        self.matcher = matcher
        self.loader = loader

    def on_mount(self) -> None:
        self.push_screen(LauncherScreen(self.matcher, self.loader), callback=self.exit)

    @property
    def launcher(self) -> LauncherScreen:
        screen = self.screen
        if not isinstance(screen, LauncherScreen):
            raise RuntimeError(f"Launcher screen is not active (current: {screen!r})")
        return screen


def run_launcher(matcher: Matcher, loader: ItemLoader) -> Optional[str]:
    """Run the TUI and return the activated value, if any."""
    return ShuttleApp(matcher, loader).run()
