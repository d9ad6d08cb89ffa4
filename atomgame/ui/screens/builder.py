"""Free-play screen for building an atom."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Label, Static

from ...atom.builder import AtomBuilder
from ..presenter import format_charge, format_counts, format_schematic


class BuilderScreen(Screen):
    """Add and remove particles and see what atom they make."""

    CSS = """
    #atom-view {
        padding: 1;
        background: $surface-darken-1;
        border: solid $primary;
        margin: 1 0;
        height: auto;
    }

    #particle-actions {
        height: auto;
    }

    #particle-actions Button {
        margin-right: 1;
    }

    .section-header {
        text-style: bold;
        margin: 1 0;
    }
    """

    BINDINGS = [
        Binding("p", "add('proton')", "p:+Proton", show=True),
        Binding("P", "remove('proton')", "P:-Proton", show=False),
        Binding("n", "add('neutron')", "n:+Neutron", show=True),
        Binding("N", "remove('neutron')", "N:-Neutron", show=False),
        Binding("e", "add('electron')", "e:+Electron", show=True),
        Binding("E", "remove('electron')", "E:-Electron", show=False),
        Binding("r", "reset_atom", "r:Reset", show=True),
    ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.atom_builder = AtomBuilder()

    def compose(self) -> ComposeResult:
        """Compose the builder screen."""
        with Container(id="main-content"):
            yield Static("Build an Atom", classes="title")
            yield Static(
                "Add particles with p/n/e, remove them with P/N/E",
                classes="subtitle",
            )

            with Vertical(id="atom-view"):
                yield Label("", id="element-name")
                yield Static("", id="atom-schematic", markup=False)
                yield Label("", id="atom-counts")
                yield Label("", id="atom-properties")

            yield Label("Particles", classes="section-header")
            with Horizontal(id="particle-actions"):
                yield Button("+ Proton", id="add-proton", variant="error")
                yield Button("- Proton", id="remove-proton")
                yield Button("+ Neutron", id="add-neutron", variant="default")
                yield Button("- Neutron", id="remove-neutron")
                yield Button("+ Electron", id="add-electron", variant="primary")
                yield Button("- Electron", id="remove-electron")
                yield Button("Reset", id="reset", variant="warning")

    def on_mount(self) -> None:
        self._update_view()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id or ""
        if button_id == "reset":
            self.action_reset_atom()
            return
        action, _, particle = button_id.partition("-")
        if action == "add":
            self.action_add(particle)
        elif action == "remove":
            self.action_remove(particle)

    def action_add(self, particle: str) -> None:
        if not getattr(self.atom_builder, f"add_{particle}")():
            self.app.notify(f"The {particle} bucket is empty", severity="warning")
        self._update_view()

    def action_remove(self, particle: str) -> None:
        getattr(self.atom_builder, f"remove_{particle}")()
        self._update_view()

    def action_reset_atom(self) -> None:
        self.atom_builder.reset()
        self._update_view()

    def _update_view(self) -> None:
        builder = self.atom_builder
        atom = builder.snapshot()

        name = builder.element_name or "(no element)"
        self.query_one("#element-name", Label).update(name)
        self.query_one("#atom-schematic", Static).update(format_schematic(atom))
        self.query_one("#atom-counts", Label).update(format_counts(atom))

        properties = [
            f"Mass number: {builder.mass_number}",
            f"Charge: {format_charge(builder.charge)}",
        ]
        if builder.proton_count:
            properties.append("Neutral atom" if builder.is_neutral else "Ion")
            properties.append("Stable" if builder.is_stable else "Unstable")
        self.query_one("#atom-properties", Label).update("   ".join(properties))
