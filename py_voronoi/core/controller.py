"""Translate discrete input events into point-store and display-mode changes."""

import sys
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO, Tuple, Union

import structlog

from .persistence import save
from .point_store import PointStore
from .render import DisplayMode

logger = structlog.get_logger()


@dataclass(frozen=True)
class KeyRelease:
    key: str


@dataclass(frozen=True)
class ButtonRelease:
    button: int = 1


@dataclass(frozen=True)
class PointerMotion:
    x: float
    y: float


Event = Union[KeyRelease, ButtonRelease, PointerMotion]


class InteractionController:
    """Owns the display mode and the last cursor position.

    Keys (case-insensitive, on release):
        n: remove all sites
        r: replace sites with ``random_count`` random ones
        l: toggle outline-only / filled
        c: recolor every site
        s: print the sites as JSON to ``output``
        escape: request shutdown
    Any mouse button release inserts a site at the last cursor position.
    """

    def __init__(self,
                 store: PointStore,
                 canvas_bounds: Tuple[float, float],
                 random_count: int = 50,
                 mode: DisplayMode = DisplayMode.FILLED,
                 output: Optional[TextIO] = None) -> None:
        self.store = store
        self.canvas_bounds = canvas_bounds
        self.random_count = random_count
        self.mode = mode
        self.cursor: Tuple[float, float] = (0.0, 0.0)
        self.output = output
        self.quit_requested = False

    def handle(self, event: Event) -> None:
        if isinstance(event, PointerMotion):
            self.cursor = (float(event.x), float(event.y))
        elif isinstance(event, ButtonRelease):
            if self.store.insert(self.cursor):
                logger.debug("Site added", x=self.cursor[0], y=self.cursor[1], sites=len(self.store))
        elif isinstance(event, KeyRelease):
            self._on_key(event.key)

    def handle_batch(self, events: Iterable[Event]) -> None:
        """Apply a batch of events in order."""
        for event in events:
            self.handle(event)

    def _on_key(self, key: Optional[str]) -> None:
        key = (key or "").lower()
        if key == "n":
            self.store.clear()
            logger.info("Sites cleared")
        elif key == "r":
            self.store.fill_random(self.random_count, self.canvas_bounds)
        elif key == "l":
            self.mode = self.mode.toggled()
            logger.info("Display mode changed", mode=self.mode.value)
        elif key == "c":
            self.store.recolor()
        elif key == "s":
            self._dump_sites()
        elif key == "escape":
            self.quit_requested = True

    def _dump_sites(self) -> None:
        out = self.output if self.output is not None else sys.stdout
        out.write(save(self.store.sites) + "\n")
        out.flush()
