"""Terminal side of the renderer, a thin layer over :class:`blessed.Terminal`.

Nothing here knows about the torus: it reports the screen size, draws a
finished :class:`~torusterm.frame.FrameBuffer`, paces frames and watches the
keyboard for a stop request.
"""

from __future__ import annotations

import contextlib
import logging

from blessed import Terminal

from . import settings
from .scene import RedrawStrategy

log = logging.getLogger(__name__)

STOP_KEYS = ("q", "Q")


def fit_size(width, height):
    """Replace each dimension below its minimum with the default."""
    w, h = width or 0, height or 0
    if w < settings.MIN_WIDTH:
        log.info("terminal width %r too small, using %d", width, settings.DEFAULT_WIDTH)
        w = settings.DEFAULT_WIDTH
    if h < settings.MIN_HEIGHT:
        log.info("terminal height %r too small, using %d", height, settings.DEFAULT_HEIGHT)
        h = settings.DEFAULT_HEIGHT
    return w, h


def terminal_size(term: Terminal) -> tuple[int, int]:
    try:
        width, height = term.width, term.height
    except OSError as err:
        log.warning("could not query terminal size: %s", err)
        width = height = None
    return fit_size(width, height)


@contextlib.contextmanager
def screen(term: Terminal):
    """Alternate screen, hidden cursor and cbreak input for the duration."""
    with term.fullscreen(), term.hidden_cursor(), term.cbreak():
        try:
            yield term
        finally:
            term.stream.write(term.normal)
            term.stream.flush()


class TerminalSink:
    """Writes frames row-major with cursor moves and 24-bit color escapes."""

    def __init__(self, term: Terminal, colored: bool = True, redraw=RedrawStrategy.FULL_CLEAR):
        self.term = term
        self.colored = colored
        self.redraw = RedrawStrategy(redraw)
        self.frames = 0

    def compose(self, buf) -> str:
        term = self.term
        out = []
        if self.redraw is RedrawStrategy.FULL_CLEAR:
            out.append(term.home + term.clear)
        for j in range(buf.height):
            out.append(term.move_xy(0, j))
            current = None
            for glyph, color in buf.row_cells(j):
                if self.colored and color != current:
                    out.append(term.color_rgb(*color) if color is not None else term.normal)
                    current = color
                out.append(glyph)
            if current is not None:
                out.append(term.normal)
        return "".join(out)

    def draw(self, buf):
        self.term.stream.write(self.compose(buf))
        self.term.stream.flush()
        self.frames += 1


class TerminalPacer:
    """Fixed per-frame delay that doubles as the stop-key poll."""

    def __init__(self, term: Terminal, delay: float = settings.FRAME_DELAY):
        self.term = term
        self.delay = delay

    def wait(self) -> bool:
        """Block for one frame delay. True if the user asked to stop."""
        key = self.term.inkey(timeout=self.delay)
        if not key:
            return False
        if key in STOP_KEYS or key.code == self.term.KEY_ESCAPE:
            log.info("stop key %r pressed", str(key))
            return True
        return False
