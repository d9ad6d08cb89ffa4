"""Screen presenting the active challenge of a level."""

from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Input, Static

from ...challenges.challenge import Challenge
from ...challenges.state import ADVANCEABLE_STATES, ChallengeState
from ...errors import GameError
from ...game.events import (
    ActiveChallengeChanged,
    AnswerChecked,
    ChallengeStateChanged,
    ElapsedTimeChanged,
    GameEvent,
    LevelCompleted,
    ScoreChanged,
)
from ...game.session import LevelResult
from ..answer_parser import AnswerParseError, parse_answer
from ..presenter import (
    answer_hint,
    challenge_prompt,
    challenge_title,
    describe_correct_answer,
    describe_result,
    format_time,
)
from ..widgets.scoreboard import Scoreboard

TICK_INTERVAL = 1.0


class ChallengeScreen(Screen):
    """Presents one challenge at a time and forwards answers to the engine."""

    CSS = """
    #challenge-area {
        height: auto;
        padding: 1;
        background: $surface-darken-1;
        border: solid $primary;
        margin: 1 0;
    }

    #feedback {
        margin: 1 0;
        color: $warning;
    }

    #challenge-actions {
        height: auto;
    }

    #challenge-actions Button {
        margin-right: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "next_challenge", "Next", show=True),
        Binding("ctrl+s", "show_answer", "Show Answer", show=True),
        Binding("escape", "start_over", "Start Over", show=True),
    ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        """Compose the challenge screen."""
        yield Scoreboard(id="scoreboard")
        with Container(id="main-content"):
            yield Static("", id="challenge-title", classes="title")
            with Vertical(id="challenge-area"):
                yield Static("", id="challenge-prompt", markup=False)
            yield Static("", id="answer-hint", classes="hint")
            yield Input(placeholder="Your answer", id="answer")
            yield Static("", id="feedback", markup=False)
            with Horizontal(id="challenge-actions"):
                yield Button("Check Answer", id="btn-check", variant="success")
                yield Button("Show Answer", id="btn-show-answer", variant="warning")
                yield Button("Next", id="btn-next", variant="primary")
                yield Button("Start Over", id="btn-start-over")

    def on_mount(self) -> None:
        engine = self.app.engine
        self._unsubscribe = engine.events.subscribe(self._on_game_event)
        self.set_interval(TICK_INTERVAL, self._tick)

        session = engine.session
        scoreboard = self.query_one(Scoreboard)
        if session is not None:
            scoreboard.set_challenge(session.challenge_index, len(session.challenges))
        scoreboard.set_score(engine.score)
        scoreboard.set_time(engine.elapsed_time, engine.timer_enabled)
        self._show_challenge(engine.active_challenge)

    def on_unmount(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._check_answer(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id

        if button_id == "btn-check":
            self._check_answer(self.query_one("#answer", Input).value)
        elif button_id == "btn-show-answer":
            self.action_show_answer()
        elif button_id == "btn-next":
            self.action_next_challenge()
        elif button_id == "btn-start-over":
            self.action_start_over()

    def action_show_answer(self) -> None:
        self._run(self.app.engine.acknowledge_exhausted)

    def action_next_challenge(self) -> None:
        self._run(self.app.engine.advance_to_next_challenge)

    def action_start_over(self) -> None:
        self.app.engine.new_game()
        self.app.pop_screen()

    def _check_answer(self, text: str) -> None:
        challenge = self.app.engine.active_challenge
        if challenge is None:
            return
        try:
            submission = parse_answer(challenge, text)
        except AnswerParseError as e:
            self.app.notify(str(e), title="Invalid answer", severity="warning")
            return
        self._run(self.app.engine.submit_answer, submission)

    def _run(self, operation, *args) -> None:
        """Call an engine operation, reporting refused calls to the player."""
        try:
            operation(*args)
        except GameError as e:
            self.app.notify(str(e), title="Not now", severity="warning")

    def _tick(self) -> None:
        self.app.engine.tick(TICK_INTERVAL)

    def _on_game_event(self, event: GameEvent) -> None:
        scoreboard = self.query_one(Scoreboard)
        if isinstance(event, ActiveChallengeChanged):
            scoreboard.set_challenge(event.challenge_index, event.challenge_count)
            self._show_challenge(event.challenge)
        elif isinstance(event, ChallengeStateChanged):
            self._update_actions(event.state)
            if event.state == ChallengeState.DISPLAYING_CORRECT_ANSWER:
                challenge = self.app.engine.active_challenge
                self.query_one("#feedback", Static).update(describe_correct_answer(challenge))
        elif isinstance(event, AnswerChecked):
            feedback = describe_result(event.result)
            if event.points_awarded:
                feedback += f" +{event.points_awarded} points"
            self.query_one("#feedback", Static).update(feedback)
        elif isinstance(event, ScoreChanged):
            scoreboard.set_score(event.score)
        elif isinstance(event, ElapsedTimeChanged):
            scoreboard.set_time(event.elapsed_time, self.app.engine.timer_enabled)
        elif isinstance(event, LevelCompleted):
            self.call_later(self._finish_level, event.result)

    def _show_challenge(self, challenge: Optional[Challenge]) -> None:
        answer = self.query_one("#answer", Input)
        answer.value = ""
        self.query_one("#feedback", Static).update("")
        if challenge is None:
            return
        self.query_one("#challenge-title", Static).update(challenge_title(challenge.challenge_type))
        self.query_one("#challenge-prompt", Static).update(challenge_prompt(challenge))
        self.query_one("#answer-hint", Static).update(answer_hint(challenge.challenge_type))
        self._update_actions(challenge.state)
        answer.focus()

    def _update_actions(self, state: ChallengeState) -> None:
        self.query_one("#btn-check", Button).disabled = not state.accepts_answers
        self.query_one("#btn-show-answer", Button).disabled = (
            state != ChallengeState.ATTEMPTS_EXHAUSTED
        )
        self.query_one("#btn-next", Button).disabled = state not in ADVANCEABLE_STATES

    def _finish_level(self, result: LevelResult) -> None:
        lines = [f"Score: {result.score} out of {result.max_score}"]
        if result.timer_enabled:
            lines.append(f"Time: {format_time(result.elapsed_time)}")
            if result.is_new_best_time:
                lines.append("New best time!")
            elif result.best_time is not None:
                lines.append(f"Best time: {format_time(result.best_time)}")
        title = "Perfect score!" if result.is_perfect else "Level complete"
        self.app.notify("\n".join(lines), title=title, timeout=10)
        self.app.engine.new_game()
        self.app.pop_screen()
