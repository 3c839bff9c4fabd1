"""
Live task list renderer.

Repaints the task tree, the bottom bar and the prompt bar in place on a
fixed interval using a Rich ``Live`` display.
"""

import logging

from rich.console import Console, Group
from rich.live import Live

from .config import REFRESH_INTERVAL, get_renderer_options
from .display.core import console as default_console
from .display.core import figure_table
from .state import RenderState
from .tree import TreeRenderer

logger = logging.getLogger(__name__)


class DefaultRenderer:
    """Animated, collapsible task list for interactive terminals.

    ``render()`` starts the live display and ``end()`` stops it after one
    last frame. Both are safe to call more than once.

    Frames are only composed inside ``Live.refresh()``, which runs under the
    Live lock. Anything else that makes Rich redraw the display (such as
    ``print()`` output routed through the console) reuses the last frame.
    """

    # Needs a real terminal to animate
    non_tty = False

    def __init__(self, tasks: list, options=None, console: Console | None = None):
        self.tasks = tasks
        self.options = get_renderer_options(options)
        self.console = console if console is not None else default_console
        self.state = RenderState()
        self._tree = TreeRenderer(self.options, figure_table(self.console))

        self._live: Live | None = None
        self._frame = Group()
        self._ticking = False
        self._final = False
        self._ended = False

    @property
    def is_rendering(self) -> bool:
        return self._live is not None

    def render(self):
        """Start the live display. Does nothing if it is already running."""
        if self._live is not None:
            return

        self._final = False
        self._ended = False
        self._live = self._create_live(auto_refresh=True)
        self._ticking = True
        self._live.start()
        logger.debug("Task list rendering started (%d top-level tasks)", len(self.tasks))

    def end(self):
        """Stop the live display after one final frame. Does nothing if already ended."""
        if self._ended:
            return
        self._ended = True

        live = self._live if self._live is not None else self._create_live(auto_refresh=False)
        self._live = None

        # The final frame leaves out the prompt bar
        self._final = True
        self._ticking = True
        try:
            if not live.is_started:
                live.start()
            live.stop()
        finally:
            self._ticking = False
        logger.debug("Task list rendering stopped (cleared=%s)", self.options.clear_output)

    def compose_frame(self, width: int | None = None) -> Group:
        """Build one screen image: task lines, bottom bar, then prompt bar."""
        lines = self._tree.render(self.tasks, self.state, width)
        lines.extend(self.state.bottom_bar.snapshot())
        if not self._final:
            lines.extend(self.state.prompt.render())
        return Group(*lines)

    def _next_frame(self) -> Group:
        # Called by Live.refresh() under its lock, and once by Live.__init__
        if self._ticking:
            self._frame = self.compose_frame(width=self.console.width)
        return self._frame

    def _create_live(self, auto_refresh: bool) -> Live:
        return Live(
            console=self.console,
            auto_refresh=auto_refresh,
            refresh_per_second=1 / REFRESH_INTERVAL,
            transient=self.options.clear_output,
            get_renderable=self._next_frame,
        )
