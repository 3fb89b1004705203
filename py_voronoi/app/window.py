"""matplotlib window hosting the interactive Voronoi canvas."""

from collections import deque
from typing import Deque, Optional

import matplotlib.pyplot as plt
import structlog

from ..config import Settings
from ..core.controller import ButtonRelease, Event, InteractionController, KeyRelease, PointerMotion
from ..core.point_store import PointStore
from ..core.render import DisplayMode, frame_for
from ..core.voronoi_diagram import DiagramAdapter
from .canvas import MatplotlibCanvas

logger = structlog.get_logger()

DPI = 100


def disable_default_keymaps() -> None:
    """Drop matplotlib's navigation shortcuts (l, s, r, c, q, ...) so they reach us."""
    for key in list(plt.rcParams):
        if key.startswith("keymap."):
            plt.rcParams[key] = []


class VoronoiWindow:
    """Queues GUI events and redraws the diagram on each timer tick.

    A tick first applies every queued event, then rebuilds and draws the
    frame. Frames are only redrawn when something was queued.
    """

    def __init__(self, settings: Settings, store: Optional[PointStore] = None) -> None:
        self.settings = settings
        width, height = settings.canvas_bounds
        self.store = store if store is not None else PointStore()
        mode = DisplayMode.OUTLINE if settings.lines_only else DisplayMode.FILLED
        self.controller = InteractionController(self.store, (width, height),
                                                random_count=settings.random_count,
                                                mode=mode)
        self.adapter = DiagramAdapter(width, height)
        self.pending: Deque[Event] = deque()
        self.dirty = True

        disable_default_keymaps()
        self.fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI)
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(settings.window_title)
        self.canvas = MatplotlibCanvas(self.fig.add_subplot(), width, height)

        self.cid_key = self.fig.canvas.mpl_connect("key_release_event", self.on_key_release)
        self.cid_button = self.fig.canvas.mpl_connect("button_release_event", self.on_button_release)
        self.cid_motion = self.fig.canvas.mpl_connect("motion_notify_event", self.on_motion)

        self.timer = self.fig.canvas.new_timer(interval=settings.frame_interval_ms)
        self.timer.add_callback(self.tick)

    # ---------------- events ---------------- #
    def on_key_release(self, event) -> None:
        if event.key:
            self._enqueue(KeyRelease(event.key))

    def on_button_release(self, event) -> None:
        self._enqueue(ButtonRelease(int(event.button)))

    def on_motion(self, event) -> None:
        if event.xdata is None or event.ydata is None:
            return
        self._enqueue(PointerMotion(event.xdata, event.ydata))

    def _enqueue(self, event: Event) -> None:
        self.pending.append(event)
        self.dirty = True

    # ---------------- frame ---------------- #
    def tick(self) -> None:
        batch = list(self.pending)
        self.pending.clear()
        self.controller.handle_batch(batch)

        if self.controller.quit_requested:
            logger.info("Quit requested")
            self.timer.stop()
            plt.close(self.fig)
            return

        if not self.dirty:
            return
        self.dirty = False
        commands = frame_for(self.store, self.controller.mode, self.adapter)
        self.canvas.draw_commands(commands)
        self.fig.canvas.draw_idle()

    def show(self) -> None:
        logger.info("Opening window",
                    width=self.settings.window_width,
                    height=self.settings.window_height,
                    sites=len(self.store),
                    mode=self.controller.mode.value)
        self.tick()
        self.timer.start()
        plt.show()
