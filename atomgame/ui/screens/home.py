"""Home screen with the two modes."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Button, Static


class HomeScreen(Screen):
    """Welcome screen for choosing between free play and the game."""

    CSS = """
    #actions {
        height: auto;
        margin: 1 0;
    }

    #actions Button {
        width: 100%;
        margin: 1 0;
    }

    #actions Button:focus {
        background: $success;
    }
    """

    BINDINGS = [
        Binding("j", "focus_next", "Down", show=False),
        Binding("k", "focus_previous", "Up", show=False),
        Binding("enter", "press_button", "Select", show=False),
    ]

    def action_press_button(self) -> None:
        """Press the focused button."""
        focused = self.focused
        if isinstance(focused, Button):
            focused.press()

    def compose(self) -> ComposeResult:
        """Compose the home screen."""
        with Container(id="main-content"):
            yield Static("Build an Atom", classes="title")
            yield Static(
                "Put protons, neutrons and electrons together, then test yourself",
                classes="subtitle",
            )

            with Vertical(id="actions"):
                yield Button("Build an Atom", id="btn-build", variant="primary")
                yield Button("Play the Game", id="btn-game", variant="success")

            yield Static("Press ? for keyboard shortcuts", classes="hint")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id

        if button_id == "btn-build":
            self.app.switch_screen("builder")
        elif button_id == "btn-game":
            self.app.switch_screen("levels")
