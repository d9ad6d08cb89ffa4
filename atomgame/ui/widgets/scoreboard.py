"""Widget showing progress through a level."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widget import Widget
from textual.widgets import Label

from ..presenter import format_time


class Scoreboard(Widget):
    """Status bar with challenge number, score and timer."""

    DEFAULT_CSS = """
    Scoreboard {
        height: auto;
        padding: 0 2;
        background: $primary-darken-2;
    }

    Scoreboard Label {
        width: 1fr;
        color: $text;
        text-style: bold;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._challenge_index = 0
        self._challenge_count = 0
        self._score = 0
        self._elapsed_time = 0.0
        self._timer_enabled = False

    def compose(self) -> ComposeResult:
        with Horizontal():
            yield Label("", id="scoreboard-challenge")
            yield Label("", id="scoreboard-score")
            yield Label("", id="scoreboard-time")

    def on_mount(self) -> None:
        self._refresh_labels()

    def set_challenge(self, index: int, count: int) -> None:
        self._challenge_index = index
        self._challenge_count = count
        self._refresh_labels()

    def set_score(self, score: int) -> None:
        self._score = score
        self._refresh_labels()

    def set_time(self, elapsed_time: float, timer_enabled: bool) -> None:
        self._elapsed_time = elapsed_time
        self._timer_enabled = timer_enabled
        self._refresh_labels()

    def _refresh_labels(self) -> None:
        if not self.is_mounted:
            return
        number = min(self._challenge_index + 1, self._challenge_count)
        self.query_one("#scoreboard-challenge", Label).update(
            f"Challenge {number} of {self._challenge_count}"
        )
        self.query_one("#scoreboard-score", Label).update(f"Score: {self._score}")
        time_text = format_time(self._elapsed_time) if self._timer_enabled else ""
        self.query_one("#scoreboard-time", Label).update(time_text)
