"""Pixel colours and single sprite frames."""

from __future__ import annotations

from dataclasses import dataclass

CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = CHANNEL_MAX

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, not {type(value).__name__}")
            if not 0 <= value <= CHANNEL_MAX:
                raise ValueError(f"{name} must be between 0 and {CHANNEL_MAX}, got {value}")

    def inverted(self) -> Color:
        """Return the colour with its RGB channels inverted and alpha kept."""
        return Color(
            CHANNEL_MAX - self.red,
            CHANNEL_MAX - self.green,
            CHANNEL_MAX - self.blue,
            self.alpha,
        )

    def hex_argb(self) -> str:
        """Return the colour as '#aarrggbb'."""
        return f"#{self.alpha:02x}{self.red:02x}{self.green:02x}{self.blue:02x}"


TRANSPARENT = Color(255, 255, 255, 0)


class Frame:
    """A grid of pixels making up one frame of a sprite."""

    def __init__(self, height: int = 0, width: int = 0) -> None:
        if height < 0 or width < 0:
            raise ValueError(f"frame size must not be negative, got {height}x{width}")
        self.height = height
        self.width = width
        self._pixels: list[list[Color]] = [[TRANSPARENT] * width for _ in range(height)]

    def _check(self, row: int, column: int) -> None:
        if not (0 <= row < self.height and 0 <= column < self.width):
            raise IndexError(
                f"pixel ({row}, {column}) outside frame of {self.height}x{self.width}"
            )

    def set_pixel(self, row: int, column: int, color: Color) -> None:
        """Set the pixel at the given row and column."""
        self._check(row, column)
        self._pixels[row][column] = color

    def pixel(self, row: int, column: int) -> Color:
        """Return the pixel at the given row and column."""
        self._check(row, column)
        return self._pixels[row][column]

    def rows(self) -> list[list[Color]]:
        """Return a copy of the pixel grid, row by row."""
        return [list(row) for row in self._pixels]

    def rotate(self) -> None:
        """Rotate the frame 90 degrees clockwise; the frame must be square."""
        if self.height != self.width:
            raise ValueError(
                f"only square frames can be rotated, got {self.height}x{self.width}"
            )
        self._pixels = [list(row) for row in zip(*reversed(self._pixels))]

    def copy(self) -> Frame:
        """Return an independent copy of the frame."""
        duplicate = Frame(self.height, self.width)
        duplicate._pixels = self.rows()
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return (
            self.height == other.height
            and self.width == other.width
            and self._pixels == other._pixels
        )

    def __repr__(self) -> str:
        return f"Frame(height={self.height}, width={self.width})"