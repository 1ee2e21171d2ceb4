"""Saving sprites to and loading them from JSON-based .ssp files."""

from __future__ import annotations

import json
import os
from typing import Any

from .frame import CHANNEL_MAX, Color, Frame
from .frames import FrameManager


class SpriteFileError(Exception):
    """Raised when a sprite file cannot be written or read."""


def sprite_to_dict(manager: FrameManager) -> dict[str, Any]:
    """Return the JSON document for all frames of the manager."""
    if not manager.frames:
        raise SpriteFileError("there are no frames to save")
    frames = []
    for index, frame in enumerate(manager.frames):
        pixels = [
            {
                "x": x,
                "y": y,
                "r": color.red,
                "g": color.green,
                "b": color.blue,
                "a": color.alpha,
            }
            for y, row in enumerate(frame.rows())
            for x, color in enumerate(row)
        ]
        frames.append({"index": index, "pixels": pixels})
    first = manager.frames[0]
    return {"height": first.height, "width": first.width, "frames": frames}


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _channel(value: Any) -> int:
    return max(0, min(_to_int(value), CHANNEL_MAX))


def load_sprite_dict(manager: FrameManager, data: Any) -> None:
    """Replace the manager's frames with those described by a JSON document."""
    if not isinstance(data, dict):
        raise SpriteFileError("invalid sprite document: top level is not an object")
    frames_data = data.get("frames")
    if not isinstance(frames_data, list):
        frames_data = []
    height = _to_int(data.get("height"))
    width = _to_int(data.get("width"))

    loaded = []
    try:
        for frame_data in frames_data:
            if not isinstance(frame_data, dict):
                frame_data = {}
            pixels = frame_data.get("pixels")
            if not isinstance(pixels, list):
                pixels = []
            frame = Frame(height, width)
            for pixel in pixels:
                if not isinstance(pixel, dict):
                    pixel = {}
                color = Color(
                    _channel(pixel.get("r")),
                    _channel(pixel.get("g")),
                    _channel(pixel.get("b")),
                    _channel(pixel.get("a")),
                )
                frame.set_pixel(_to_int(pixel.get("y")), _to_int(pixel.get("x")), color)
            loaded.append(frame)
    except (IndexError, ValueError) as error:
        raise SpriteFileError(f"invalid sprite document: {error}") from error

    manager.reset(height, width)
    for frame in loaded:
        manager.add_loaded_frame(frame)


def save_sprite(manager: FrameManager, path: str | os.PathLike[str]) -> None:
    """Write the manager's frames to a sprite file."""
    document = sprite_to_dict(manager)
    try:
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(document, handle, indent=4, sort_keys=True)
            handle.write("\n")
    except OSError as error:
        raise SpriteFileError(f"failed to open file for writing: {path}") from error


def load_sprite(manager: FrameManager, path: str | os.PathLike[str]) -> None:
    """Read a sprite file into the manager, replacing its frames."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as error:
        raise SpriteFileError(f"failed to open file for reading: {path}") from error
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as error:
        raise SpriteFileError("invalid JSON format") from error
    load_sprite_dict(manager, data)