"""Level selection screen."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Button, Label, Static

from ...errors import GameError
from ...game.events import BestTimesChanged, GameEvent
from ..presenter import format_time
from .challenge import ChallengeScreen


class LevelSelectScreen(Screen):
    """Choose a game level and whether the timer runs."""

    CSS = """
    #levels {
        height: auto;
        margin: 1 0;
    }

    #levels Button {
        width: 100%;
        margin: 0 0 1 0;
    }

    #best-times {
        padding: 1;
        background: $surface-darken-1;
        border: solid $primary;
    }
    """

    BINDINGS = [
        Binding("j", "focus_next", "Down", show=False),
        Binding("k", "focus_previous", "Up", show=False),
        Binding("t", "toggle_timer", "t:Timer", show=True),
    ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        """Compose the level selection screen."""
        engine = self.app.engine
        with Container(id="main-content"):
            yield Static("Choose Your Level", classes="title")
            with Vertical(id="levels"):
                for index, level in enumerate(engine.config.levels):
                    yield Button(
                        f"Level {index + 1}: {level.name}",
                        id=f"level-{index}",
                        variant="primary",
                    )
                    yield Static(level.description, classes="hint")
            yield Button("", id="btn-timer")
            yield Label("Best Times", classes="section-header")
            yield Static("", id="best-times")

    def on_mount(self) -> None:
        self._unsubscribe = self.app.engine.events.subscribe(
            self._on_best_times_changed, BestTimesChanged
        )
        self._update_timer_button()
        self._update_best_times()

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()

    def on_screen_resume(self) -> None:
        self._update_best_times()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id or ""
        if button_id == "btn-timer":
            self.action_toggle_timer()
        elif button_id.startswith("level-"):
            level = self.app.engine.config.levels[int(button_id.removeprefix("level-"))]
            try:
                self.app.engine.start_level(level.id)
            except GameError as e:
                self.app.notify(str(e), title="Cannot start level", severity="error")
                return
            self.app.push_screen(ChallengeScreen())

    def action_toggle_timer(self) -> None:
        engine = self.app.engine
        engine.set_timer_enabled(not engine.timer_enabled)
        self._update_timer_button()

    def _on_best_times_changed(self, event: GameEvent) -> None:
        self._update_best_times()

    def _update_timer_button(self) -> None:
        state = "on" if self.app.engine.timer_enabled else "off"
        self.query_one("#btn-timer", Button).label = f"Timer: {state}"

    def _update_best_times(self) -> None:
        engine = self.app.engine
        best_times = engine.best_times
        lines = []
        for index, level in enumerate(engine.config.levels):
            best = best_times.get(level.id)
            lines.append(f"Level {index + 1}: {format_time(best) if best is not None else '-'}")
        self.query_one("#best-times", Static).update("\n".join(lines))
