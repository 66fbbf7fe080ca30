# inlyne

Pieces of a Markdown viewer that are useful on their own:

- `inlyne.keybindings.keys`: virtual keys, modifier states, modified keys and
  multi-key combos, with the names used for keys in configuration.
- `inlyne.history`: back/forward navigation between visited files.
- `inlyne.imaging.decode` and `inlyne.imaging.data`: decoding images to RGBA8
  pixel data kept in memory as LZ4-compressed blobs, plus sizing helpers.
- `inlyne.html.style`: parsing inline `style` attributes.
- `inlyne.html.picture`: `<picture>` elements whose source follows a dark or
  light colour scheme.
- `inlyne.debug_fmt`: compact text representations of colours, byte blobs and
  spacers.

## Installation

```
pip install inlyne
```

Python 3.11 or newer is required. Image decoding uses Pillow and the `lz4`
package.

## Keys and key combos

```python
from inlyne.keybindings.keys import Key, KeyCombo, ModifiedKey, Modifiers, VirtKey

g = ModifiedKey.from_virt(VirtKey.G)
cap_g = ModifiedKey(Key.parse("g"), Modifiers.SHIFT)

str(cap_g)                                   # "<Shift+g>"
str(ModifiedKey.from_virt(VirtKey.UP))       # "<Up>"

gg = KeyCombo((g, g))
str(gg)                                      # "gg"
gg.starts_with(KeyCombo((g,)))               # True
len(gg)                                      # 2

Key.from_scan_code(42)                       # a key known only by its scan code
Key.parse("nope")                            # raises ValueError: Unsupported key: nope
```

## History

```python
from inlyne.history import History

history = History("README.md")
history.make_next("docs/usage.md")
history.previous()   # Path("README.md")
history.next()       # Path("docs/usage.md")
history.next()       # None: already at the newest entry
history.path()       # Path("docs/usage.md")
```

Visiting a new path with `make_next` drops any forward history.

## Images

```python
from inlyne.imaging.data import Image, ImageData, ImageSize, Px

with open("logo.png", "rb") as f:
    data = ImageData.load(f.read(), True)   # ValueError if it cannot be decoded

pixels = data.to_bytes()                    # raw RGBA8 bytes
data.dimensions                             # (width, height)

image = Image(image_data=data).with_size(ImageSize.width(Px.parse("170px")))
image.dimensions_from_image_size(image.size)  # width 170, height keeping the aspect ratio
```

`ImageData.from_rgba(pixels, width, height, scale)` compresses pixels you
already have. The lower-level functions live in `inlyne.imaging.decode`:
`decode_and_compress(contents)` returns the LZ4 blob and the dimensions,
`lz4_compress(stream)` and `lz4_decompress(blob, size)` handle LZ4 frames, and
`Rgba8Adapter` is a readable stream that adds an opaque alpha channel to RGB8
data.

## HTML helpers

```python
from inlyne.html.style import FontWeight, TextColor, iter_styles

list(iter_styles("color:#ff0000;font-weight:bold"))
# [TextColor(color=16711680), FontWeight.BOLD]
```

Unsupported declarations are skipped.

```python
from inlyne.html.picture import Picture, ResolvedTheme, parse_media

builder = Picture.builder()
builder.src = "default.png"
builder.dark_variant = "dark.png"
picture = builder.finish()                   # ValueError if no src was set

picture.resolve_src(ResolvedTheme.DARK)      # "dark.png"
picture.resolve_src(ResolvedTheme.LIGHT)     # "default.png"
parse_media("(prefers-color-scheme: light)") # ResolvedTheme.LIGHT
```

## Debug formatting

```python
from inlyne.debug_fmt import format_bytes_prefix, format_f32_color, format_spacer

format_f32_color((0.0, 0.0, 0.0, 1.0))      # "Color(BLACK)"
format_bytes_prefix(b"\x01\x02\x03\x04\x05") # "{ len: 5, data: [1, 2, 3, ..] }"
format_spacer(5.0, True)                     # "VisibleSpacer(5)"
```

## What this package does not do

It is a library, not a viewer: there is no command, no window and no Markdown
rendering. It has no list of default keybindings, no loading of bindings from
configuration and no matcher that turns key presses into actions. It has no
colour themes or code highlighting themes, and it does not watch files for
changes.

## Running the tests

```
pip install "inlyne[test]"
pytest
```