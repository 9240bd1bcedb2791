"""
Search session - the incremental filter state behind the launcher.

Owns the query, the matcher, the full item list, the filtered list and the
selected index. The host UI feeds it commands and reads snapshots; the load
phase hands the item list over exactly once through ``load()``.

Filtering strategy:
- Appending text narrows the current filtered list (incremental update).
- Backspace, delete-word and clear recompute from the full list (reset update).
- The selected item is kept selected across updates as long as it still
  matches; otherwise the selection falls back to the first row.

All state changes and reads happen under one lock, so a background load and
the UI event stream never interleave inside an update.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from shuttle.matchers import Matcher
from shuttle.models import Item

from .commands import (
    Activate,
    AppendText,
    Backspace,
    Clear,
    Command,
    CommandOutcome,
    DeleteWord,
    MoveDown,
    MoveUp,
    Quit,
)

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    """Lifecycle of a session's item list."""

    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionSnapshot:
    """Consistent, read-only view of a session after an edit."""

    status: SessionStatus
    query: str = ""
    filtered: Tuple[Item, ...] = ()
    selected: int = 0
    total: int = 0
    error: Optional[str] = None

    @property
    def selected_item(self) -> Optional[Item]:
        """Get the currently selected item."""
        if 0 <= self.selected < len(self.filtered):
            return self.filtered[self.selected]
        return None

    @property
    def status_text(self) -> str:
        """Get status line text."""
        if self.status == SessionStatus.LOADING:
            return "Loading items..."
        if self.status == SessionStatus.FAILED:
            return f"Error: {self.error}"
        if not self.query:
            return f"{self.total} items"
        return f"{len(self.filtered)}/{self.total} items"


class SearchSession:
    """Stateful core of the launcher.

    Args:
        matcher: Matching strategy, fixed for the session's lifetime
        on_state_update: Called with a fresh snapshot after each change
    """

    def __init__(
        self,
        matcher: Matcher,
        on_state_update: Optional[Callable[[SessionSnapshot], None]] = None,
    ):
        self.matcher = matcher
        self.on_state_update = on_state_update
        self._lock = threading.RLock()
        self._status = SessionStatus.LOADING
        self._error: Optional[str] = None
        self._query = ""
        self._all: List[Item] = []
        self._filtered: Optional[List[Item]] = None
        self._selected = 0

    # ------------------------------------------------------------------
    # Load phase hand-off
    # ------------------------------------------------------------------

    def load(self, items: Sequence[Item]) -> None:
        """Publish the full item list. Can only happen once."""
        with self._lock:
            if self._status != SessionStatus.LOADING:
                raise RuntimeError(f"Session already {self._status.value}")
            self._all = list(items)
            self._filtered = None
            self._selected = 0
            self._status = SessionStatus.LOADED
            logger.info("Session loaded with %d items", len(self._all))
        self._notify()

    def fail(self, error: BaseException) -> None:
        """Record a load-phase failure for the host to surface."""
        with self._lock:
            if self._status != SessionStatus.LOADING:
                raise RuntimeError(f"Session already {self._status.value}")
            self._status = SessionStatus.FAILED
            self._error = str(error)
            logger.error("Session load failed: %s", error)
        self._notify()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def query(self) -> str:
        with self._lock:
            return self._query

    @property
    def status(self) -> SessionStatus:
        with self._lock:
            return self._status

    def snapshot(self) -> SessionSnapshot:
        """Return the current state, filtering first if a recompute is pending."""
        with self._lock:
            self._ensure_filtered()
            return SessionSnapshot(
                status=self._status,
                query=self._query,
                filtered=tuple(self._filtered or ()),
                selected=self._selected,
                total=len(self._all),
                error=self._error,
            )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def apply(self, command: Command) -> CommandOutcome:
        """Apply one command. Commands are serialized by the session lock."""
        with self._lock:
            outcome = self._dispatch(command)
        self._notify()
        return outcome

    def _dispatch(self, command: Command) -> CommandOutcome:
        if isinstance(command, AppendText):
            self._append_text(command.text)
        elif isinstance(command, Backspace):
            self._backspace()
        elif isinstance(command, DeleteWord):
            self._delete_word()
        elif isinstance(command, Clear):
            self._set_query_and_reset("")
        elif isinstance(command, MoveUp):
            self._move(-1)
        elif isinstance(command, MoveDown):
            self._move(1)
        elif isinstance(command, Activate):
            return self._activate()
        elif isinstance(command, Quit):
            return CommandOutcome(terminate=True)
        else:
            raise TypeError(f"Unsupported command: {command!r}")
        return CommandOutcome()

    def _append_text(self, text: str) -> None:
        if not text:
            return
        self._query += text
        if self._status != SessionStatus.LOADED:
            return
        if self._filtered is None:
            self._update_filtered_reset()
        else:
            self._update_filtered(self._filtered)

    def _backspace(self) -> None:
        if not self._query:
            return
        # str slicing works on code points, never splitting a character
        self._set_query_and_reset(self._query[:-1])

    def _delete_word(self) -> None:
        pos = self._query.rstrip().rfind(" ")
        self._set_query_and_reset(self._query[:pos + 1] if pos >= 0 else "")

    def _set_query_and_reset(self, query: str) -> None:
        self._query = query
        if self._status == SessionStatus.LOADED:
            self._update_filtered_reset()

    def _move(self, delta: int) -> None:
        if self._status != SessionStatus.LOADED:
            return
        self._ensure_filtered()
        if not self._filtered:
            return
        self._selected = (self._selected + delta) % len(self._filtered)

    def _activate(self) -> CommandOutcome:
        if self._status != SessionStatus.LOADED:
            return CommandOutcome()
        self._ensure_filtered()
        if not self._filtered:
            return CommandOutcome()
        item = self._filtered[self._selected]
        logger.info("Activated %s", item.value)
        return CommandOutcome(activated=item.value, terminate=True)

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def _ensure_filtered(self) -> None:
        if self._status == SessionStatus.LOADED and self._filtered is None:
            self._update_filtered_reset()

    def _update_filtered_reset(self) -> None:
        """Recompute from the full list; an empty query shows everything."""
        if self._query:
            self._update_filtered(self._all)
        else:
            self._replace_filtered(list(self._all))

    def _update_filtered(self, source: Sequence[Item]) -> None:
        """Filter ``source`` with the current query."""
        self._replace_filtered(self.matcher.matches(self._query, source))

    def _replace_filtered(self, filtered_new: List[Item]) -> None:
        """Install a new filtered list, keeping the selected item selected."""
        selected_item = None
        if self._filtered and 0 <= self._selected < len(self._filtered):
            selected_item = self._filtered[self._selected]

        self._selected = 0
        if selected_item is not None:
            for index, item in enumerate(filtered_new):
                if item.value == selected_item.value:
                    self._selected = index
                    break

        self._filtered = filtered_new

    def _notify(self) -> None:
        """Notify listeners of state change."""
        if self.on_state_update:
            self.on_state_update(self.snapshot())
