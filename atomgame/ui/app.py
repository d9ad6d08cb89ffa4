"""Main Textual application."""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..game.engine import GameEngine
from .screens.builder import BuilderScreen
from .screens.home import HomeScreen
from .screens.levels import LevelSelectScreen


class AtomGameApp(App):
    """Build-an-atom playground and quiz game."""

    TITLE = "atomgame"
    SUB_TITLE = "Build atoms from protons, neutrons and electrons"

    CSS = """
    Screen {
        background: $surface;
    }

    #main-content {
        width: 100%;
        height: 100%;
        padding: 1 2;
    }

    .title {
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }

    .subtitle {
        color: $text-muted;
        margin-bottom: 2;
    }

    .section-header {
        text-style: bold;
        margin: 1 0;
    }

    .hint {
        color: $text-muted;
        text-style: italic;
    }

    *:focus {
        border: solid $success;
    }

    Button:focus {
        background: $primary-darken-1;
    }
    """

    BINDINGS = [
        # Screen navigation (number keys)
        Binding("1", "go_home", "1:Home", show=True),
        Binding("2", "builder", "2:Build", show=True),
        Binding("3", "levels", "3:Game", show=True),
        # Quit/help
        Binding("q", "quit", "q:Quit", show=True),
        Binding("?", "help", "?:Help", show=True),
        Binding("escape", "go_back", "Esc:Back", show=False),
    ]

    SCREENS = {
        "home": HomeScreen,
        "builder": BuilderScreen,
        "levels": LevelSelectScreen,
    }

    def __init__(self, engine: Optional[GameEngine] = None, **kwargs):
        super().__init__(**kwargs)
        self.engine = engine or GameEngine()

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        yield Header()
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("home")

    def action_go_home(self) -> None:
        """Navigate to home screen."""
        self._leave_game()
        self.switch_screen("home")

    def action_builder(self) -> None:
        """Navigate to the atom builder."""
        self._leave_game()
        self.switch_screen("builder")

    def action_levels(self) -> None:
        """Navigate to level selection."""
        self._leave_game()
        self.switch_screen("levels")

    def action_go_back(self) -> None:
        """Go back to previous screen or home."""
        if len(self.screen_stack) > 2:
            self._leave_game()
        else:
            self.switch_screen("home")

    def action_help(self) -> None:
        """Show help."""
        self.notify(
            "Screens: 1=Home, 2=Build, 3=Game\n"
            "Build: p/n/e add a particle, P/N/E remove one, r resets\n"
            "Game: t toggles the timer, Enter checks an answer,\n"
            "  ctrl+s shows the answer, ctrl+n moves on\n"
            "Answers: 'p n e', 'p A charge' or '<symbol> neutral|ion'\n"
            "Other: Esc=Back, q=Quit",
            title="Keyboard Shortcuts",
            timeout=10,
        )

    def _leave_game(self) -> None:
        """Abandon a level in progress and close its challenge screen."""
        while len(self.screen_stack) > 2:
            self.pop_screen()
        self.engine.new_game()
