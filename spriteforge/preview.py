"""Timing, layout and frame sequencing for the animation preview."""

from __future__ import annotations

from collections.abc import Iterator

from .editor import CanvasGeometry, canvas_geometry
from .frame import Frame
from .frames import FrameManager

MS_PER_SECOND = 1000


def frame_delay_ms(fps: int) -> int:
    """Return the whole milliseconds to wait between frames at the given rate."""
    if fps <= 0:
        raise ValueError(f"frames per second must be positive, got {fps}")
    return MS_PER_SECOND // fps


def preview_geometry(
    frame_width: int,
    frame_height: int,
    label_width: int,
    label_height: int,
    actual_size: bool,
) -> CanvasGeometry:
    """Lay a frame out on the preview area, or at one display pixel per pixel."""
    if actual_size:
        label_width, label_height = frame_width, frame_height
    return canvas_geometry(label_width, label_height, frame_width, frame_height)


def animation_frames(manager: FrameManager) -> Iterator[Frame]:
    """Yield the manager's frames in order, over and over.

    The frames are copied once when iteration starts, so later edits do not
    change a running animation. Nothing is yielded when there are no frames.
    """
    snapshot = [frame.copy() for frame in manager]
    if not snapshot:
        return
    while True:
        yield from snapshot