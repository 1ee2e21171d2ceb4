"""The ordered collection of frames that make up a sprite."""

from __future__ import annotations

from collections.abc import Iterator

from .frame import Color, Frame


class FrameManager:
    """Creates, updates, duplicates, deletes and rotates sprite frames."""

    def __init__(self, height: int, width: int) -> None:
        self.height = height
        self.width = width
        self.frames: list[Frame] = []

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def _frame(self, index: int) -> Frame:
        if not 0 <= index < len(self.frames):
            raise IndexError(f"frame {index} out of range for {len(self.frames)} frames")
        return self.frames[index]

    def add_frame(self) -> int:
        """Append a blank frame of the current size; return the frame count."""
        self.frames.append(Frame(self.height, self.width))
        return len(self.frames)

    def add_loaded_frame(self, frame: Frame) -> int:
        """Append an existing frame; return the frame count."""
        self.frames.append(frame)
        return len(self.frames)

    def delete_frame(self, index: int) -> bool:
        """Delete a frame unless it is the only one; return whether it was deleted."""
        self._frame(index)
        if len(self.frames) <= 1:
            return False
        del self.frames[index]
        return True

    def copy_frame(self, index: int) -> int:
        """Append a copy of the frame at index; return the frame count."""
        self.frames.append(self._frame(index).copy())
        return len(self.frames)

    def update_pixel(self, frame_index: int, row: int, column: int, color: Color) -> None:
        """Set one pixel of one frame."""
        self._frame(frame_index).set_pixel(row, column, color)

    def pixels_for_frame(self, index: int) -> list[list[Color]]:
        """Return the pixel rows of the frame at index."""
        return self._frame(index).rows()

    def rotate_clockwise(self, index: int) -> list[list[Color]]:
        """Rotate the frame at index 90 degrees clockwise; return its new pixels."""
        frame = self._frame(index)
        frame.rotate()
        return frame.rows()

    def reset(self, height: int, width: int) -> None:
        """Drop all frames and set a new frame size."""
        self.frames.clear()
        self.height = height
        self.width = width