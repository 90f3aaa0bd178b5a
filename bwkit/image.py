"""Raster image of 32-bit RGB pixels with 24-bit BMP output."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

from bwkit import log

BMP_HEADER_LENGTH = 54
_PIXELS_PER_METRE = (0x13, 0x0B)  # 2835 pixels per metre, little endian

PathLike = Union[str, "os.PathLike[str]"]


class Image:
    """A ``width`` x ``height`` grid of RGB values stored row by row, top row first."""

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        pixels: Optional[Iterable[int]] = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        if pixels is None:
            self.pixels: List[int] = [0] * (width * height)
        else:
            self.pixels = [int(p) & 0xFFFFFFFF for p in pixels]
            if len(self.pixels) != width * height:
                raise ValueError(
                    f"expected {width * height} pixels, got {len(self.pixels)}"
                )

    def __repr__(self) -> str:
        return f"{type(self).__name__}: {self.width}x{self.height}"

    def pixel_at(self, x: int, y: int) -> int:
        """Return the pixel at ``(x, y)``, or 0 when it lies outside the image."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return 0
        if not self.pixels:
            return 0
        return self.pixels[y * self.width + x]

    def size(self) -> Tuple[int, int]:
        """Return ``(width, height)``."""
        return self.width, self.height

    def bmp_bytes(self) -> bytes:
        """Encode the image as an uncompressed 24 bits-per-pixel BMP file."""
        if not self.width:
            log.error("Image.write_bmp", "Zero width image.")
        if not self.height:
            log.error("Image.write_bmp", "Zero height image.")

        length = BMP_HEADER_LENGTH + 3 * self.width * self.height
        header = bytearray(BMP_HEADER_LENGTH)
        header[0:2] = b"BM"
        header[2:6] = (length & 0xFFFFFFFF).to_bytes(4, "little")
        header[10] = BMP_HEADER_LENGTH
        header[14] = 40
        header[18:21] = (self.width & 0xFFFFFF).to_bytes(3, "little")
        header[22:25] = (self.height & 0xFFFFFF).to_bytes(3, "little")
        header[26] = 1
        header[28] = 24
        header[34] = 16
        header[38], header[39] = _PIXELS_PER_METRE
        header[42], header[43] = _PIXELS_PER_METRE

        body = bytearray()
        # BMP stores the bottom row first.
        for y in reversed(range(self.height)):
            row = self.pixels[y * self.width:(y + 1) * self.width]
            for pixel in row:
                body += bytes((pixel & 0xFF, (pixel >> 8) & 0xFF, (pixel >> 16) & 0xFF))
        return bytes(header) + bytes(body)

    def write_bmp(self, path: PathLike) -> None:
        """Write the image to ``path`` as a 24 bits-per-pixel BMP file."""
        data = self.bmp_bytes()
        with open(path, "wb") as handle:
            handle.write(data)