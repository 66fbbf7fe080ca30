"""Compressed image pixel data and image elements laid out in a document."""

from __future__ import annotations

import io
import logging
import math
import re
import struct
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from ..debug_fmt import format_bytes_prefix
from .decode import decode_and_compress, lz4_compress, lz4_decompress

logger = logging.getLogger(__name__)

_PX = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _div_f32(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return _f32(numerator / denominator)


def _saturating_u32(value: float) -> int:
    """Convert a float to an unsigned 32-bit integer, truncating and saturating."""
    if math.isnan(value):
        return 0
    if value <= 0:
        return 0
    if value >= _U32_MAX:
        return _U32_MAX
    return int(value)


@dataclass(frozen=True)
class Px:
    """A length in pixels."""

    value: int

    @classmethod
    def parse(cls, text: str) -> Px:
        """Parse ``"500"`` or ``"500px"``."""
        number = text.removesuffix("px")
        if not _PX.fullmatch(number):
            raise ValueError(f"Invalid pixel value: {text!r}")
        value = int(number)
        if value > _U32_MAX:
            raise ValueError(f"Pixel value out of range: {text!r}")
        return cls(value)


class SizeKind(Enum):
    WIDTH = "width"
    HEIGHT = "height"


@dataclass(frozen=True)
class ImageSize:
    """A requested width or height for an image; the other side keeps the aspect ratio."""

    kind: SizeKind
    px: Px

    @classmethod
    def width(cls, px: Px | int) -> ImageSize:
        return cls(SizeKind.WIDTH, px if isinstance(px, Px) else Px(px))

    @classmethod
    def height(cls, px: Px | int) -> ImageSize:
        return cls(SizeKind.HEIGHT, px if isinstance(px, Px) else Px(px))


@dataclass
class ImageData:
    """RGBA8 pixel data kept LZ4-compressed in memory."""

    lz4_blob: bytes
    scale: bool
    dimensions: tuple[int, int]

    def __repr__(self) -> str:
        width, height = self.dimensions
        scale = "true" if self.scale else "false"
        return (
            f"ImageData {{ lz4_blob: {format_bytes_prefix(self.lz4_blob)}, "
            f"scale: {scale}, dimensions: ({width}, {height}) }}"
        )

    @classmethod
    def load(cls, data: bytes, scale: bool) -> ImageData:
        """Decode an encoded image; raise ``ValueError`` if it cannot be decoded."""
        blob, dimensions = decode_and_compress(data)
        return cls(blob, scale, dimensions)

    @classmethod
    def from_rgba(cls, pixels: bytes, width: int, height: int, scale: bool) -> ImageData:
        """Compress raw RGBA8 pixels of a ``width`` by ``height`` image."""
        if len(pixels) != width * height * 4:
            raise ValueError("Pixel buffer has invalid dimensions")
        start = time.perf_counter()
        blob = lz4_compress(io.BytesIO(bytes(pixels)))
        logger.debug(
            "Compressing image:\n- Full %.2f MiB\n- Compressed %.2f MiB\n- Time %.2fs",
            len(pixels) / (1024 * 1024),
            len(blob) / (1024 * 1024),
            time.perf_counter() - start,
        )
        return cls(blob, scale, (width, height))

    def to_bytes(self) -> bytes:
        """Return the decompressed RGBA8 pixel data."""
        return lz4_decompress(self.lz4_blob, self._rgba_byte_size())

    def _rgba_byte_size(self) -> int:
        width, height = self.dimensions
        return width * height * 4


@dataclass
class Image:
    """An image element with its optional alignment, size and link."""

    image_data: ImageData | None = None
    hidpi_scale: float = 1.0
    is_aligned: object | None = None
    size: ImageSize | None = None
    is_link: str | None = field(default=None)

    def with_align(self, align: object) -> Image:
        self.is_aligned = align
        return self

    def with_size(self, size: ImageSize) -> Image:
        self.size = size
        return self

    def set_link(self, link: str) -> None:
        self.is_link = link

    def buffer_dimensions(self) -> tuple[int, int] | None:
        """The pixel dimensions of the loaded data, or ``None`` while not loaded."""
        if self.image_data is None:
            return None
        return self.image_data.dimensions

    def dimensions_from_image_size(self, size: ImageSize) -> tuple[int, int] | None:
        """Scale the loaded image to ``size``, keeping its aspect ratio."""
        dimensions = self.buffer_dimensions()
        if dimensions is None:
            return None
        width, height = (_f32(float(d)) for d in dimensions)
        target = size.px.value
        if size.kind is SizeKind.WIDTH:
            ratio = _div_f32(_f32(float(target)), width)
            return target, _saturating_u32(_f32(ratio * height))
        ratio = _div_f32(_f32(float(target)), height)
        return _saturating_u32(_f32(ratio * width)), target


def point(
    x: float,
    y: float,
    position: Sequence[float],
    size: Sequence[float],
    screen: Sequence[float],
) -> tuple[float, float, float]:
    """Map a corner of the unit quad to clip space for a placed, sized image."""
    scale_x = size[0] / screen[0]
    scale_y = size[1] / screen[1]
    shift_x = (position[0] / screen[0]) * 2.0
    shift_y = (position[1] / screen[1]) * 2.0
    new_x = (x * scale_x) - (1.0 - scale_x) + shift_x
    new_y = (y * scale_y) + (1.0 - scale_y) - shift_y
    return (new_x, new_y, 0.0)