import io

import pytest
from PIL import Image

from inlyne.imaging.decode import (
    Rgba8Adapter,
    decode_and_compress,
    lz4_compress,
    lz4_decompress,
)


def _encode(mode, fmt, size=(7, 5)):
    width, height = size
    image = Image.new(mode, size)
    pixels = [
        tuple((x * 37 + y * 11 + c * 53) % 256 for c in range(len(mode)))
        for y in range(height)
        for x in range(width)
    ]
    image.putdata(pixels)
    out = io.BytesIO()
    image.save(out, format=fmt)
    return out.getvalue()


def _expected_rgba(encoded):
    with Image.open(io.BytesIO(encoded)) as image:
        return image.convert("RGBA").tobytes()


def _read_in_chunks(stream, size):
    parts = []
    while chunk := stream.read(size):
        parts.append(chunk)
    return b"".join(parts)


def test_lz4_round_trip():
    data = bytes(range(256)) * 100
    blob = lz4_compress(io.BytesIO(data))
    assert lz4_decompress(blob, len(data)) == data


def test_lz4_round_trip_empty():
    blob = lz4_compress(io.BytesIO(b""))
    assert lz4_decompress(blob, 0) == b""


def test_lz4_decompress_truncates_to_size():
    data = b"abcdefgh" * 10
    blob = lz4_compress(io.BytesIO(data))
    assert lz4_decompress(blob, 5) == data[:5]


def test_lz4_decompress_rejects_garbage():
    with pytest.raises(ValueError):
        lz4_decompress(b"definitely not lz4", 10)


def test_adapter_adds_opaque_alpha():
    adapter = Rgba8Adapter(io.BytesIO(bytes([1, 2, 3, 4, 5, 6])), "RGB")
    assert adapter.read() == bytes([1, 2, 3, 255, 4, 5, 6, 255])


@pytest.mark.parametrize("chunk", [1, 3, 4, 5, 7, 64])
def test_adapter_small_reads_match_full_read(chunk):
    rgb = bytes(i % 256 for i in range(3 * 50))
    full = Rgba8Adapter(io.BytesIO(rgb), "RGB").read()
    pieces = _read_in_chunks(Rgba8Adapter(io.BytesIO(rgb), "RGB"), chunk)
    assert pieces == full
    assert len(full) == 4 * 50
    assert full[3::4] == b"\xff" * 50
    assert full[0::4] == rgb[0::3]


def test_adapter_passes_rgba_through():
    rgba = bytes(range(40))
    assert Rgba8Adapter(io.BytesIO(rgba), "RGBA").read() == rgba


def test_adapter_works_behind_buffered_reader():
    rgb = bytes(range(30))
    reader = io.BufferedReader(Rgba8Adapter(io.BytesIO(rgb), "RGB"), buffer_size=5)
    result = reader.read()
    assert len(result) == 40
    assert result[3::4] == b"\xff" * 10


def test_adapter_rejects_other_modes():
    with pytest.raises(ValueError):
        Rgba8Adapter(io.BytesIO(b""), "L")


def test_adapter_is_readable():
    assert Rgba8Adapter(io.BytesIO(b""), "RGB").readable() is True


@pytest.mark.parametrize(
    "mode, fmt",
    [
        ("RGB", "PNG"),
        ("RGBA", "PNG"),
        ("RGB", "JPEG"),
        ("RGB", "GIF"),
        ("RGBA", "GIF"),
        ("RGB", "TIFF"),
        ("RGBA", "WEBP"),
        ("RGB", "BMP"),
        ("L", "PNG"),
    ],
)
def test_decode_matches_full_conversion(mode, fmt):
    encoded = _encode(mode, fmt)
    blob, dimensions = decode_and_compress(encoded)
    assert dimensions == (7, 5)
    assert lz4_decompress(blob, 7 * 5 * 4) == _expected_rgba(encoded)


def test_decode_rejects_non_images():
    with pytest.raises(ValueError):
        decode_and_compress(b'{"im": "not an image"}')