"""Decoding PNG images into RGBA pixel data."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass, field

import pygame

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class ImageError(Exception):
    """Raised when an image cannot be read or decoded."""


@dataclass
class Image:
    """An image as rows of RGBA8 pixels, first row at the top."""

    width: int
    height: int
    data: bytes
    _surface: pygame.Surface | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        if len(self.data) != self.width * self.height * 4:
            raise ValueError("pixel data does not match width * height * 4")

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """The RGBA value of the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        offset = (y * self.width + x) * 4
        r, g, b, a = self.data[offset : offset + 4]
        return r, g, b, a

    def to_surface(self) -> pygame.Surface:
        """A surface holding this image; created once and then reused."""
        if self._surface is None:
            self._surface = pygame.image.frombuffer(
                self.data, (self.width, self.height), "RGBA"
            )
        return self._surface


def decode_image(png_data: bytes) -> Image:
    """Decode PNG bytes into an :class:`Image`."""
    png_data = bytes(png_data)
    if not png_data.startswith(_PNG_SIGNATURE):
        raise ImageError("data is not a PNG image")
    try:
        surface = pygame.image.load(io.BytesIO(png_data), "image.png")
        width, height = surface.get_size()
        data = pygame.image.tobytes(surface, "RGBA")
    except pygame.error as exc:
        raise ImageError(f"could not decode PNG: {exc}") from exc
    return Image(width, height, data)


def load_image(path: str | os.PathLike) -> Image:
    """Read and decode a PNG file."""
    try:
        with open(path, "rb") as handle:
            png_data = handle.read()
    except OSError as exc:
        raise ImageError(f"could not read {os.fspath(path)!r}: {exc}") from exc
    return decode_image(png_data)