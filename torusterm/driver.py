import logging

from .frame import FrameBuffer, render_frame
from .linalg import axis_for_frame
from .scene import RenderConfig, Scene

log = logging.getLogger(__name__)


def run(scene: Scene, config: RenderConfig, buf: FrameBuffer, sink, pacer=None) -> int:
    """Render ``config.frames`` frames into ``sink``.

    ``sink.draw(buf)`` receives each finished frame. ``pacer.wait()`` is called
    once per frame and may return True to stop early. Returns the number of
    frames drawn.
    """
    drawn = 0
    for frame in range(config.frames):
        axis = axis_for_frame(frame, config.step_degrees, config.base_axis)
        render_frame(buf, scene, axis, colored=config.colored)
        sink.draw(buf)
        drawn += 1
        if pacer is not None and pacer.wait():
            log.info("stopped after %d frames", drawn)
            break
    return drawn
