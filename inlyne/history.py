"""Back and forward navigation between visited files."""

from __future__ import annotations

from pathlib import Path


class History:
    """A list of visited paths with a cursor, like a browser history."""

    def __init__(self, path: Path | str) -> None:
        self._paths: list[Path] = [Path(path)]
        self._index = 0

    def __repr__(self) -> str:
        return f"History(paths={self._paths!r}, index={self._index})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, History):
            return NotImplemented
        return (self._paths, self._index) == (other._paths, other._index)

    def path(self) -> Path:
        """Return the current path."""
        return self._paths[self._index]

    def make_next(self, path: Path | str) -> None:
        """Visit ``path``, dropping any forward history."""
        del self._paths[self._index + 1 :]
        self._paths.append(Path(path))
        self._index += 1

    def next(self) -> Path | None:
        """Move forward; return the new path or ``None`` at the newest entry."""
        if self._index + 1 == len(self._paths):
            return None
        self._index += 1
        return self.path()

    def previous(self) -> Path | None:
        """Move back; return the new path or ``None`` at the oldest entry."""
        if self._index == 0:
            return None
        self._index -= 1
        return self.path()