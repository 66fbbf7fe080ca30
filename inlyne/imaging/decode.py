"""Decoding images into LZ4-compressed RGBA8 pixel data."""

from __future__ import annotations

import io
import logging
import time
from typing import BinaryIO

import lz4.frame
from PIL import Image

logger = logging.getLogger(__name__)

ImageParts = tuple[bytes, tuple[int, int]]

# Formats whose RGB/RGBA pixel data is handed to the compressor without a full conversion
_STREAMED_FORMATS = frozenset({"PNG", "JPEG", "GIF", "TIFF", "WEBP"})
_ADAPTABLE_MODES = frozenset({"RGB", "RGBA"})
_CHUNK_SIZE = 64 * 1024


def _mib(size: int) -> float:
    return size / (1024 * 1024)


class Rgba8Adapter(io.RawIOBase):
    """A readable stream turning RGB8 or RGBA8 pixel data into RGBA8.

    RGB pixels get a fully opaque alpha channel added; RGBA data passes through.
    """

    def __init__(self, source: BinaryIO, mode: str) -> None:
        super().__init__()
        if mode not in _ADAPTABLE_MODES:
            raise ValueError(f"Unsupported pixel format for streaming: {mode}")
        self._source = source
        self._has_alpha = mode == "RGBA"
        self._scratch = bytearray()
        self._pending = b""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        with memoryview(buffer) as raw_view, raw_view.cast("B") as view:
            wanted = len(view)
            if self._has_alpha:
                data = self._source.read(wanted) or b""
                view[: len(data)] = data
                return len(data)

            while len(self._scratch) < wanted:
                missing = wanted - len(self._scratch)
                pixels = (missing + 3) // 4
                chunk = self._source.read(pixels * 3)
                if not chunk:
                    break
                self._scratch += self._expand(bytes(chunk))

            count = min(wanted, len(self._scratch))
            view[:count] = self._scratch[:count]
            del self._scratch[:count]
            return count

    def _expand(self, chunk: bytes) -> bytearray:
        data = self._pending + chunk
        whole = len(data) - len(data) % 3
        rgb, self._pending = data[:whole], data[whole:]
        num_pixels = whole // 3
        rgba = bytearray(num_pixels * 4)
        rgba[0::4] = rgb[0::3]
        rgba[1::4] = rgb[1::3]
        rgba[2::4] = rgb[2::3]
        rgba[3::4] = b"\xff" * num_pixels
        return rgba


def lz4_compress(stream: BinaryIO) -> bytes:
    """Compress everything read from ``stream`` into an LZ4 frame."""
    compressor = lz4.frame.LZ4FrameCompressor(block_size=lz4.frame.BLOCKSIZE_MAX256KB)
    parts = [compressor.begin()]
    while chunk := stream.read(_CHUNK_SIZE):
        parts.append(compressor.compress(chunk))
    parts.append(compressor.flush())
    return b"".join(parts)


def lz4_decompress(blob: bytes, size: int) -> bytes:
    """Decompress an LZ4 frame, keeping at most ``size`` bytes."""
    try:
        data = lz4.frame.decompress(blob)
    except Exception as err:
        raise ValueError("Failed decompressing LZ4 data") from err
    return data[:size]


def decode_and_compress(contents: bytes) -> ImageParts:
    """Decode an encoded image to RGBA8 and compress it.

    Returns the compressed pixel data and the ``(width, height)`` of the image.
    """
    start = time.perf_counter()
    try:
        with Image.open(io.BytesIO(contents)) as image:
            dimensions = image.size
            if image.format in _STREAMED_FORMATS and image.mode in _ADAPTABLE_MODES:
                raw = image.tobytes()
                blob = lz4_compress(Rgba8Adapter(io.BytesIO(raw), image.mode))
                logger.debug(
                    "Streaming image decode & compression:\n"
                    "- Full %.2f MiB\n- Compressed %.2f MiB\n- Time %.2fs",
                    _mib(dimensions[0] * dimensions[1] * 4),
                    _mib(len(blob)),
                    time.perf_counter() - start,
                )
                return blob, dimensions

            rgba = image.convert("RGBA").tobytes()
    except OSError as err:
        raise ValueError("Failed decoding image") from err

    logger.debug("Decoded full image in memory %.3f MiB", _mib(len(rgba)))
    return lz4_compress(io.BytesIO(rgba)), dimensions