"""Main TUI application for cabinet."""

import logging
import os
from pathlib import Path

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, Label, Static

from cabinet import Cabinet
from dom import Document, Element, Location
from model import Layout, demo_layout
from ui import DrawerPanel, KnobButton
from ui.ids import css
import ui.ids as ids

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "cabinet"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "cabinet.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class CabinetApp(App):
    """TUI hosting the drawers and knobs of one layout."""

    TITLE = "cabinet"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, layout: Layout | None = None, fragment: str | None = None) -> None:
        super().__init__()
        self.layout_spec = layout if layout is not None else demo_layout()
        if fragment is None:
            fragment = self.layout_spec.fragment
        self.document = Document(
            scheduler=self._schedule_flush,
            location=Location(fragment=fragment.lstrip("#")),
        )
        self.cabinet = Cabinet(self.document)
        self.knob_elements: dict[str, Element] = {}
        self.drawer_elements: dict[str, Element] = {}
        self.heading_elements: dict[str, Element] = {}
        self._build_elements()

    def _build_elements(self) -> None:
        """Create the document elements the layout describes."""
        for spec in self.layout_spec.knobs:
            self.knob_elements[spec.id] = self.document.create_element(
                "button", {"id": spec.id, "class": "knob"}
            )
        for spec in self.layout_spec.drawers:
            if not spec.headless:
                self.heading_elements[spec.id] = self.document.create_element(
                    "button", {"id": ids.heading_element(spec.id), "class": "drawer-heading"}
                )
            self.drawer_elements[spec.id] = self.document.create_element("section", spec.to_attributes())

    def compose(self) -> ComposeResult:
        yield Label(self.layout_spec.title, id=ids.HEADER_TITLE)
        with Horizontal(id=ids.KNOB_BAR):
            for spec in self.layout_spec.knobs:
                yield KnobButton(self.knob_elements[spec.id], spec.label or spec.id)
        with VerticalScroll(id=ids.DRAWERS):
            for spec in self.layout_spec.drawers:
                yield DrawerPanel(
                    self.drawer_elements[spec.id],
                    spec,
                    heading=self.heading_elements.get(spec.id),
                )
        yield Static("", id=ids.STATUS_BAR)

    # =========================================================================
    # Document delivery
    # =========================================================================

    def _schedule_flush(self, flush) -> None:
        self.call_later(self.flush_document)

    def flush_document(self) -> None:
        """Deliver pending mutations, then refresh the status bar."""
        self.document.flush()
        self._update_location()

    def _update_location(self) -> None:
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(f"location: {self.document.location.href}")
        except NoMatches:
            pass

    # =========================================================================
    # Events
    # =========================================================================

    @on(Button.Pressed, ".knob")
    def on_knob_pressed(self, event: Button.Pressed) -> None:
        """Turn a knob button press into a click on its element."""
        event.stop()
        button = event.button
        if isinstance(button, KnobButton):
            log.debug(f"Knob pressed: {button.element!r}")
            self.cabinet.click(button.element)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        """Activate knobs, then drawers, then the heading knobs."""
        for spec in self.layout_spec.knobs:
            self.cabinet.create_knob(self.knob_elements[spec.id], spec.to_settings())
        for spec in self.layout_spec.drawers:
            drawer = self.cabinet.create_drawer(self.drawer_elements[spec.id], spec.to_settings())
            heading = self.heading_elements.get(spec.id)
            if heading is not None:
                drawer.add_knob(heading)
        log.info(f"Activated {len(self.cabinet.registry.drawers)} drawers from '{self.layout_spec.title}'")
        self.flush_document()
