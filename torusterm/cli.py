import argparse
import logging
import sys

from blessed import Terminal

from . import settings
from .driver import run
from .frame import FrameBuffer, render_frame
from .linalg import axis_for_frame
from .scene import RedrawStrategy, RenderConfig, RenderMode, Scene
from .shading import PALETTES, RAMPS
from .terminal import TerminalPacer, TerminalSink, screen, terminal_size

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _size(text):
    try:
        w, h = (int(v) for v in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}")
    if w < 1 or h < 1:
        raise argparse.ArgumentTypeError("size must be at least 1x1")
    return w, h


def _non_negative_int(text):
    v = int(text)
    if v < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return v


def _non_negative_float(text):
    v = float(text)
    if v < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return v


def build_parser():
    ap = argparse.ArgumentParser(prog="torusterm", description="Spinning SDF torus in the terminal")
    ap.add_argument("--frames", type=_non_negative_int, default=settings.FRAME_COUNT, help="Number of frames to draw")
    ap.add_argument("--delay", type=_non_negative_float, default=settings.FRAME_DELAY, help="Seconds between frames")
    ap.add_argument("--step", type=float, default=settings.ROTATION_STEP_DEG, help="Axis spin, degrees per frame")
    ap.add_argument("--mode", choices=[m.value for m in RenderMode], default=settings.RENDER_MODE)
    ap.add_argument("--redraw", choices=[r.value for r in RedrawStrategy], default=settings.REDRAW)
    ap.add_argument("--ramp", choices=sorted(RAMPS), default=settings.RAMP)
    ap.add_argument("--palette", choices=sorted(PALETTES), default=settings.PALETTE)
    ap.add_argument("--color-scale", type=float, default=settings.COLOR_SCALE, help="Shading divisor for color intensity")
    ap.add_argument("--size", type=_size, default=None, help="Force WIDTHxHEIGHT instead of the terminal size")
    ap.add_argument("--snapshot", action="store_true", help="Print frame 0 as plain text and exit")
    ap.add_argument("--log-file", default=None, help="Write log records here")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def setup_logging(log_file=None, verbose=False):
    level = logging.DEBUG if verbose else logging.WARNING
    if log_file:
        logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT,
                            filename=log_file, filemode="w")
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def main(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    try:
        scene = Scene(ramp=RAMPS[args.ramp], gradient=PALETTES[args.palette],
                      color_scale=args.color_scale)
        config = RenderConfig(frames=args.frames, delay=args.delay, step_degrees=args.step,
                              mode=args.mode, redraw=args.redraw)
    except ValueError as err:
        ap.error(str(err))

    term = Terminal()
    width, height = args.size if args.size else terminal_size(term)
    buf = FrameBuffer(width, height)
    log.info("rendering %dx%d, %d frames, mode=%s redraw=%s", width, height,
             config.frames, config.mode.value, config.redraw.value)

    if args.snapshot:
        axis = axis_for_frame(0, config.step_degrees, config.base_axis)
        render_frame(buf, scene, axis, colored=False)
        sys.stdout.write("\n".join(buf.to_lines()) + "\n")
        return 0

    sink = TerminalSink(term, colored=config.colored, redraw=config.redraw)
    pacer = TerminalPacer(term, config.delay)
    try:
        with screen(term):
            drawn = run(scene, config, buf, sink, pacer)
    except KeyboardInterrupt:
        drawn = sink.frames
        log.info("interrupted")
    except OSError as err:
        log.error("terminal output failed: %s", err)
        return 1
    log.info("drew %d frames", drawn)
    return 0
