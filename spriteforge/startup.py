"""The start-up form for choosing a new sprite's size or a file to open."""

from __future__ import annotations

import os

MIN_SIZE = 1
MAX_SIZE = 64
SSP_SUFFIX = ".ssp"
CONFIRMED_MARK = "\u2705"
UNCONFIRMED_MARK = "\u274c"
_MAX_DIGITS = len(str(MAX_SIZE))


def _accepts(text: str) -> bool:
    return text == "" or (text.isascii() and text.isdigit() and len(text) <= _MAX_DIGITS)


def _to_int(text: str) -> int:
    return int(text) if text else 0


class SizeForm:
    """Width and height entry for a square sprite, with a size confirmation."""

    def __init__(self) -> None:
        self.width_text = ""
        self.height_text = ""
        self.confirmed = False

    @property
    def status(self) -> str:
        """The mark shown next to the size: a tick once confirmed, a cross otherwise."""
        return CONFIRMED_MARK if self.confirmed else UNCONFIRMED_MARK

    def _set_both(self, text: str) -> None:
        if not _accepts(text):
            raise ValueError(f"size must be a number of at most {_MAX_DIGITS} digits, got {text!r}")
        self.width_text = text
        self.height_text = text
        self.confirmed = False

    def set_width_text(self, text: str) -> None:
        """Enter a width; the height follows it and any confirmation is dropped."""
        self._set_both(text)

    def set_height_text(self, text: str) -> None:
        """Enter a height; the width follows it and any confirmation is dropped."""
        self._set_both(text)

    def can_set_size(self) -> bool:
        """Return whether both fields hold text, so the size can be confirmed."""
        return bool(self.width_text) and bool(self.height_text)

    def confirm_size(self) -> bool:
        """Confirm the entered size if it lies in range; return whether it does."""
        width = _to_int(self.width_text)
        height = _to_int(self.height_text)
        self.confirmed = MIN_SIZE <= width <= MAX_SIZE and MIN_SIZE <= height <= MAX_SIZE
        return self.confirmed

    def requested_size(self) -> tuple[int, int]:
        """Return the confirmed (width, height)."""
        if not self.confirmed:
            raise ValueError("the sprite size has not been confirmed")
        return _to_int(self.width_text), _to_int(self.height_text)


def ensure_ssp_suffix(path: str | os.PathLike[str]) -> str:
    """Return the path with the .ssp suffix added unless it already ends in one."""
    text = os.fspath(path)
    if text.lower().endswith(SSP_SUFFIX):
        return text
    return text + SSP_SUFFIX


def is_ssp_file(path: str | os.PathLike[str]) -> bool:
    """Return whether the path names a .ssp file, ignoring case."""
    return os.fspath(path).lower().endswith(SSP_SUFFIX)