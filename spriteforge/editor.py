"""Editing state for a sprite: canvas, tools, colour and frame stack."""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .frame import TRANSPARENT, Color
from .frames import FrameManager
from .storage import save_sprite

CANVAS_SIZE = 500
BACKGROUND = Color(100, 100, 100, 50)
SSP_SUFFIX = ".ssp"
_CHANNELS = ("red", "green", "blue", "alpha")


class Tool(Enum):
    """The action a click on the canvas performs."""

    DRAW = "draw"
    ERASE = "erase"
    PICK = "pick"


def _div(numerator: int, denominator: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class CanvasGeometry:
    """How a sprite grid is laid out on a display area."""

    label_width: int
    label_height: int
    sprite_width: int
    sprite_height: int
    pixel_size: int
    offset_x: int
    offset_y: int

    def cell_rect(self, x: int, y: int) -> tuple[int, int, int, int]:
        """Return (left, top, width, height) of the cell at sprite column x, row y."""
        return (
            self.offset_x + x * self.pixel_size,
            self.offset_y + y * self.pixel_size,
            self.pixel_size,
            self.pixel_size,
        )

    def to_cell(self, px: int, py: int) -> tuple[int, int] | None:
        """Map a display position to (x, y) in the sprite, or None if outside it."""
        x = _div(px - self.offset_x, self.pixel_size)
        y = _div(py - self.offset_y, self.pixel_size)
        if 0 <= x < self.sprite_width and 0 <= y < self.sprite_height:
            return x, y
        return None


def canvas_geometry(
    label_width: int, label_height: int, sprite_width: int, sprite_height: int
) -> CanvasGeometry:
    """Fit a sprite of the given size centred into a display area."""
    if sprite_width <= 0 or sprite_height <= 0:
        raise ValueError(
            f"sprite size must be positive, got {sprite_width}x{sprite_height}"
        )
    pixel_size = max(1, min(label_width // sprite_width, label_height // sprite_height))
    offset_x = _div(label_width - pixel_size * sprite_width, 2)
    offset_y = _div(label_height - pixel_size * sprite_height, 2)
    return CanvasGeometry(
        label_width,
        label_height,
        sprite_width,
        sprite_height,
        pixel_size,
        offset_x,
        offset_y,
    )


class SpriteEditor:
    """The editing session over a set of frames."""

    def __init__(self, frames: FrameManager, width: int, height: int) -> None:
        self.frames = frames
        self.width = width
        self.height = height
        self.canvas: list[list[Color]] = self._blank(BACKGROUND)
        self.color = Color(0, 0, 0, 255)
        self.tool: Tool | None = None
        self.mouse_pressed = False
        self.selected_index: int | None = None
        self._labels: list[str] = []

    def _blank(self, color: Color) -> list[list[Color]]:
        return [[color] * self.width for _ in range(self.height)]

    def _current_index(self) -> int:
        return 0 if self.selected_index is None else self.selected_index

    def _default_geometry(self) -> CanvasGeometry:
        return canvas_geometry(CANVAS_SIZE, CANVAS_SIZE, self.width, self.height)

    def set_color_channel(self, channel: str, value: int) -> Color:
        """Change one channel ('red', 'green', 'blue' or 'alpha') of the colour."""
        if channel not in _CHANNELS:
            raise ValueError(f"unknown colour channel: {channel!r}")
        self.color = dataclasses.replace(self.color, **{channel: value})
        return self.color

    def select_tool(self, tool: Tool) -> None:
        """Make the given tool the active one."""
        self.tool = Tool(tool)

    def select_frame(self, index: int) -> list[list[Color]]:
        """Select a frame and show its pixels on the canvas."""
        rows = self.frames.pixels_for_frame(index)
        self.selected_index = index
        self.canvas = rows
        return [list(row) for row in rows]

    def frame_labels(self) -> list[str]:
        """Return the labels of the frame stack, in order."""
        return list(self._labels)

    def _append_label(self, count: int) -> None:
        self._labels.append(f"Frame{count}")

    def add_frame(self) -> int:
        """Append a blank frame; return the frame count."""
        count = self.frames.add_frame()
        self._append_label(count)
        return count

    def delete_selected_frame(self) -> bool:
        """Delete the selected frame unless it is the last; return whether it was."""
        index = self.selected_index
        if index is None or len(self._labels) <= 1:
            return False
        del self._labels[index]
        self.frames.delete_frame(index)
        self._labels = [f"Frame {number}" for number in range(1, len(self._labels) + 1)]
        self.select_frame(min(index, len(self._labels) - 1))
        return True

    def duplicate_selected_frame(self) -> int | None:
        """Append a copy of the selected frame; return the frame count."""
        if self.selected_index is None:
            return None
        count = self.frames.copy_frame(self.selected_index)
        self._append_label(count)
        return count

    def rotate_selected_frame(self) -> list[list[Color]]:
        """Rotate the selected frame (or the first) clockwise and show it."""
        rows = self.frames.rotate_clockwise(self._current_index())
        self.canvas = rows
        return [list(row) for row in rows]

    def invert(self) -> None:
        """Invert the RGB channels of every pixel in the current frame."""
        index = self._current_index()
        for y, row in enumerate(self.canvas):
            for x, color in enumerate(row):
                inverted = color.inverted()
                row[x] = inverted
                self.frames.update_pixel(index, y, x, inverted)

    def apply_tool(self, x: int, y: int) -> Color | None:
        """Apply the active tool at sprite column x, row y; return the colour involved."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) outside sprite of {self.width}x{self.height}")
        if self.tool is Tool.DRAW:
            self.canvas[y][x] = self.color
            self.frames.update_pixel(self._current_index(), y, x, self.color)
            return self.color
        if self.tool is Tool.ERASE:
            self.canvas[y][x] = TRANSPARENT
            self.frames.update_pixel(self._current_index(), y, x, TRANSPARENT)
            return TRANSPARENT
        if self.tool is Tool.PICK:
            self.color = self.canvas[y][x]
            return self.color
        return None

    def press(
        self, px: int, py: int, geometry: CanvasGeometry | None = None
    ) -> tuple[int, int] | None:
        """Start a stroke at a display position; return the cell hit, if any."""
        self.mouse_pressed = True
        cell = (geometry or self._default_geometry()).to_cell(px, py)
        if cell is not None:
            self.apply_tool(*cell)
        return cell

    def move(
        self, px: int, py: int, geometry: CanvasGeometry | None = None
    ) -> tuple[int, int] | None:
        """Continue a stroke while the mouse is pressed; return the cell hit, if any."""
        if not self.mouse_pressed:
            return None
        cell = (geometry or self._default_geometry()).to_cell(px, py)
        if cell is not None:
            self.apply_tool(*cell)
        return cell

    def release(self) -> None:
        """End the current stroke."""
        self.mouse_pressed = False

    def reinitialize(self, width: int, height: int) -> None:
        """Start a new sprite of the given size with one blank frame."""
        self.width = width
        self.height = height
        self.canvas = self._blank(TRANSPARENT)
        self.frames.reset(height, width)
        self._labels = []
        self.selected_index = None
        self.add_frame()

    def initialize_from_loaded(self) -> None:
        """Rebuild the editor from the frames already held by the manager."""
        self.width = self.frames.width
        self.height = self.frames.height
        self.canvas = self._blank(TRANSPARENT)
        self._labels = []
        self.selected_index = None
        for count in range(1, len(self.frames) + 1):
            self._append_label(count)
        if len(self.frames):
            self.select_frame(0)

    def save(self, path: str | os.PathLike[str]) -> Path:
        """Save all frames, adding the .ssp suffix if missing; return the path used."""
        text = os.fspath(path)
        if not text.lower().endswith(SSP_SUFFIX):
            text += SSP_SUFFIX
        save_sprite(self.frames, text)
        return Path(text)