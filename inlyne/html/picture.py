"""The ``<picture>`` element and its colour-scheme dependent sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..imaging.data import ImageSize


class ResolvedTheme(Enum):
    """A concrete colour scheme: dark or light."""

    DARK = "dark"
    LIGHT = "light"


_MEDIA_QUERIES = {
    "(prefers-color-scheme: dark)": ResolvedTheme.DARK,
    "(prefers-color-scheme: light)": ResolvedTheme.LIGHT,
}


def parse_media(value: str) -> ResolvedTheme | None:
    """Read a ``media`` attribute; only ``prefers-color-scheme`` queries are understood."""
    return _MEDIA_QUERIES.get(value)


@dataclass
class PictureBuilder:
    """Collects the parts of a ``<picture>`` while its children are parsed."""

    align: object | None = None
    dark_variant: str | None = None
    light_variant: str | None = None
    size: ImageSize | None = None
    src: str | None = None

    def finish(self) -> Picture:
        """Build the picture; raise ``ValueError`` if no ``src`` was seen."""
        if self.src is None:
            raise ValueError("Missing `src` link for <picture>")
        return Picture(
            src=self.src,
            align=self.align,
            dark_variant=self.dark_variant,
            light_variant=self.light_variant,
            size=self.size,
        )


@dataclass(frozen=True)
class Picture:
    """An image with optional variants for dark and light colour schemes."""

    src: str
    align: object | None = None
    dark_variant: str | None = None
    light_variant: str | None = None
    size: ImageSize | None = None

    @classmethod
    def builder(cls) -> PictureBuilder:
        return PictureBuilder()

    def resolve_src(self, scheme: ResolvedTheme | None) -> str:
        """Pick the source for ``scheme``, falling back to the default ``src``."""
        if scheme is ResolvedTheme.DARK and self.dark_variant is not None:
            return self.dark_variant
        if scheme is ResolvedTheme.LIGHT and self.light_variant is not None:
            return self.light_variant
        return self.src