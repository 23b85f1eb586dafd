"""
ip411 - Locate an IP address on a terminal world map

PANES:
- map: braille world map with the located address marked
- info: hostname, organisation and place details for the address

CONTROLS:
- r: Redraw both panes
- q / Escape / Ctrl+C: Quit
"""

import asyncio
import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static
from rich.text import Text
from rich.style import Style

from .config import Config
from .errors import Ip411Error, LookupFailedError
from .info import format_info
from .location import LocationRecord
from .lookup import Address, fetch_location
from .raster import render_map

logger = logging.getLogger(__name__)


# =============================================================================
# PANES
# =============================================================================

class MapPane(Static):
    """World map pane. Redrawn whenever its size changes."""

    def on_resize(self, event: events.Resize) -> None:
        if isinstance(self.app, Ip411App) and self.app.record is not None:
            self.app.start_map_pass()


class InfoPane(Static):
    """Details for the located address."""


def map_text(body: str) -> Text:
    return Text(body, style=Style(color="green"), no_wrap=True, end="")


def info_text(body: str) -> Text:
    text = Text(no_wrap=True, end="")
    for i, line in enumerate(body.splitlines()):
        label, _, value = line.partition(": ")
        if i:
            text.append("\n")
        text.append(f"{label}: ", style=Style(color="cyan", bold=True))
        text.append(value, style=Style(color="white"))
    return text


def error_text(message: str) -> Text:
    return Text(message, style=Style(color="red", bold=True), end="")


# =============================================================================
# MAIN APPLICATION
# =============================================================================

class Ip411App(App):
    """
    ip411 - IP geolocation on a world map

    The lookup runs once. The map and info panes are rendered by two
    independent tasks that share one lock for writing into the screen.
    """

    TITLE = "ip411"

    CSS = """
    Screen {
        background: #000000;
        layout: vertical;
    }

    #map {
        height: 1fr;
        border: solid green;
        background: #000000;
    }

    #info {
        border: solid green;
        padding: 0 1;
    }

    Static {
        color: #00ff00;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("r", "redraw", "Redraw"),
    ]

    def __init__(
        self,
        record: Optional[LocationRecord] = None,
        address: Optional[Address] = None,
        config: Optional[Config] = None,
    ):
        super().__init__()
        self.record = record
        self.address = address
        self.user_config = config or Config()
        self._surface_lock = asyncio.Lock()

    def compose(self) -> ComposeResult:
        self.map_pane = MapPane(id="map")
        self.info_pane = InfoPane(id="info")
        yield self.map_pane
        yield self.info_pane

    def on_mount(self) -> None:
        self.info_pane.styles.height = self.user_config.info_height
        if self.record is None:
            self.info_pane.update(Text("Looking up address...", style=Style(color="yellow")))
            self.run_worker(self._lookup(), name="lookup", exclusive=True, group="lookup")
        else:
            self.start_render()

    # === RENDER PASSES ===

    async def _lookup(self) -> None:
        try:
            self.record = await asyncio.to_thread(fetch_location, self.address, self.user_config)
        except LookupFailedError as e:
            logger.error("%s", e)
            self.exit(return_code=1, message=str(e))
            return
        self.start_render()

    def start_render(self) -> None:
        self.start_map_pass()
        self.run_worker(self._info_pass(), name="info", exclusive=True, group="info")

    def start_map_pass(self) -> None:
        self.run_worker(self._map_pass(), name="map", exclusive=True, group="map")

    async def _flush(self, pane: Static, content: Text) -> None:
        async with self._surface_lock:
            pane.update(content)

    async def _map_pass(self) -> None:
        record = self.record
        if record is None:
            return
        size = self.map_pane.content_size
        if size.width <= 0 or size.height <= 0:
            return
        try:
            body = await asyncio.to_thread(
                render_map, record, size.width, size.height, self.user_config.marker
            )
        except Ip411Error as e:
            logger.error("map pass failed: %s", e)
            await self._flush(self.map_pane, error_text(f"Cannot plot location: {e}"))
            return
        await self._flush(self.map_pane, map_text(body))

    async def _info_pass(self) -> None:
        record = self.record
        if record is None:
            return
        try:
            body = await asyncio.to_thread(format_info, record, self.user_config.placeholder)
        except Ip411Error as e:
            logger.error("info pass failed: %s", e)
            await self._flush(self.info_pane, error_text(f"Cannot describe location: {e}"))
            return
        await self._flush(self.info_pane, info_text(body))

    # === ACTIONS ===

    def action_redraw(self) -> None:
        if self.record is not None:
            self.start_render()


# =============================================================================
# ENTRY POINT
# =============================================================================

def run(
    record: Optional[LocationRecord] = None,
    address: Optional[Address] = None,
    config: Optional[Config] = None,
) -> int:
    """Run the ip411 application and return its exit code."""
    app = Ip411App(record=record, address=address, config=config)
    app.run()
    return app.return_code or 0
