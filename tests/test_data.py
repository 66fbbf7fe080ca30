import io

import pytest
from PIL import Image as PilImage

from inlyne.imaging.data import Image, ImageData, ImageSize, Px, SizeKind, point


def _encode(mode: str, fmt: str) -> bytes:
    image = PilImage.new(mode, (5, 3))
    for x in range(5):
        for y in range(3):
            if mode == "RGBA":
                image.putpixel((x, y), (x * 40, y * 70, 200, 100 + x * 20))
            else:
                image.putpixel((x, y), (x * 40, y * 70, 200))
    out = io.BytesIO()
    image.save(out, format=fmt)
    return out.getvalue()


def test_px_parsing():
    assert Px.parse("500") == Px(500)
    assert Px.parse("500px") == Px(500)


@pytest.mark.parametrize("text", ["", "px", "-5", "abc", "5.5px", "99999999999"])
def test_px_parsing_rejects(text):
    with pytest.raises(ValueError):
        Px.parse(text)


@pytest.mark.parametrize(
    "mode,fmt",
    [
        ("RGB", "GIF"),
        ("RGB", "JPEG"),
        ("RGB", "PNG"),
        ("RGB", "BMP"),
        ("RGBA", "GIF"),
        ("RGBA", "PNG"),
        ("RGBA", "BMP"),
        ("RGBA", "WEBP"),
        ("RGB", "TIFF"),
    ],
)
def test_source_image_variety(mode, fmt):
    data = _encode(mode, fmt)
    with PilImage.open(io.BytesIO(data)) as decoded:
        expected = decoded.convert("RGBA").tobytes()
    image = ImageData.load(data, False)
    assert image.dimensions == (5, 3)
    assert image.to_bytes() == expected


def test_load_invalid_data_raises():
    with pytest.raises(ValueError):
        ImageData.load(b'{"im": "not an image"}', True)


def test_from_rgba_round_trip():
    pixels = bytes(range(2 * 3 * 4))
    data = ImageData.from_rgba(pixels, 2, 3, False)
    assert data.dimensions == (2, 3)
    assert data.scale is False
    assert data.to_bytes() == pixels


def test_from_rgba_wrong_length():
    with pytest.raises(ValueError):
        ImageData.from_rgba(b"\x00" * 7, 1, 2, True)


def test_image_data_repr():
    data = ImageData.from_rgba(b"\x01\x02\x03\x04", 1, 1, True)
    text = repr(data)
    assert text.startswith("ImageData { lz4_blob: { len: ")
    assert text.endswith("scale: true, dimensions: (1, 1) }")


def test_image_size_constructors():
    assert ImageSize.width(10) == ImageSize(SizeKind.WIDTH, Px(10))
    assert ImageSize.height(Px(7)) == ImageSize(SizeKind.HEIGHT, Px(7))


def test_builders_and_link():
    image = Image().with_align("center").with_size(ImageSize.height(170))
    image.set_link("https://example.com")
    assert image.is_aligned == "center"
    assert image.size == ImageSize.height(170)
    assert image.is_link == "https://example.com"


def test_buffer_dimensions():
    assert Image().buffer_dimensions() is None
    data = ImageData.from_rgba(b"\x00" * 4 * 4 * 2, 4, 2, False)
    assert Image(image_data=data).buffer_dimensions() == (4, 2)


def test_dimensions_from_image_size():
    data = ImageData.from_rgba(b"\x00" * 4 * 4 * 2, 4, 2, False)
    image = Image(image_data=data)
    assert image.dimensions_from_image_size(ImageSize.width(8)) == (8, 4)
    assert image.dimensions_from_image_size(ImageSize.height(1)) == (2, 1)
    assert image.dimensions_from_image_size(ImageSize.width(3)) == (3, 1)


def test_dimensions_from_image_size_without_data():
    assert Image().dimensions_from_image_size(ImageSize.width(8)) is None


def test_point_full_screen_corners():
    assert point(-1.0, 1.0, (0.0, 0.0), (100.0, 100.0), (100.0, 100.0)) == (-1.0, 1.0, 0.0)
    assert point(1.0, -1.0, (0.0, 0.0), (100.0, 100.0), (100.0, 100.0)) == (1.0, -1.0, 0.0)


def test_point_top_left_stays_at_origin():
    assert point(-1.0, 1.0, (0.0, 0.0), (50.0, 50.0), (100.0, 100.0)) == (-1.0, 1.0, 0.0)
    x, y, z = point(1.0, -1.0, (0.0, 0.0), (50.0, 50.0), (100.0, 100.0))
    assert (x, y, z) == (0.0, 0.0, 0.0)