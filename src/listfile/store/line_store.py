"""Line store: a list of strings mirrored line-by-line to a text file."""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from listfile.config.schema import ListFileConfig

logger = logging.getLogger(__name__)


class ListFile:
    """Ordered, file-backed collection of strings.

    With ``auto_flush`` every mutating call rewrites the backing file before it
    returns. Without it, mutations only set ``is_dirty`` and the file is
    written by ``flush()`` or ``close()``.

    Assigning through ``store[i] = value`` changes memory only. Use
    ``set_element()`` for a set that is persisted.
    """

    def __init__(self, path: Path | str, auto_flush: bool = True, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._auto_flush = auto_flush
        self._encoding = encoding
        self._lines: list[str] = []
        self._dirty = False
        self._closed = False
        self._load()

    @classmethod
    def from_config(cls, config: ListFileConfig) -> ListFile:
        """Open the store described by the ``store`` section of a config."""
        if not config.store.path:
            raise ValueError("store.path is not set in config")
        return cls(
            Path(config.store.path).expanduser(),
            auto_flush=config.store.auto_flush,
            encoding=config.store.encoding,
        )

    def _load(self) -> None:
        if not self._path.exists():
            logger.debug("No file at %s, starting empty", self._path)
            return
        # Universal newlines turn \r\n and \r into \n before the split.
        # Undecodable bytes become U+FFFD instead of failing the load.
        with open(self._path, encoding=self._encoding, errors="replace", newline=None) as f:
            content = f.read()
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        self._lines = lines
        logger.debug("Loaded %d lines from %s", len(self._lines), self._path)

    def _write(self) -> None:
        """Replace the file content with the current lines."""
        with open(self._path, "w", encoding=self._encoding) as f:
            for line in self._lines:
                f.write(line + "\n")
        logger.debug("Wrote %d lines to %s", len(self._lines), self._path)

    def _delete(self) -> None:
        self._path.unlink(missing_ok=True)
        logger.debug("Deleted %s", self._path)

    def _changed(self) -> None:
        if self._auto_flush:
            self._write()
        else:
            self._dirty = True

    def _check_index(self, index: int, upper: int) -> int:
        index = operator.index(index)
        if index < 0 or index >= upper:
            raise IndexError(f"index {index} out of range for {len(self._lines)} lines")
        return index

    # -- properties --------------------------------------------------------

    @property
    def path(self) -> Path:
        return self._path

    @property
    def auto_flush(self) -> bool:
        return self._auto_flush

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def is_dirty(self) -> bool:
        """True if there are changes not yet written to disk."""
        return self._dirty

    @property
    def is_read_only(self) -> bool:
        return False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def count(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    # -- sequence protocol -------------------------------------------------

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> str:
        return self._lines[self._check_index(index, len(self._lines))]

    def __setitem__(self, index: int, value: str) -> None:
        self._lines[self._check_index(index, len(self._lines))] = value

    def __delitem__(self, index: int) -> None:
        self.remove_at(index)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))

    def __contains__(self, item: object) -> bool:
        return item in self._lines

    def __repr__(self) -> str:
        mode = "auto" if self._auto_flush else "deferred"
        return (
            f"ListFile(path={str(self._path)!r}, count={len(self._lines)}, "
            f"mode={mode}, dirty={self._dirty})"
        )

    # -- mutations ---------------------------------------------------------

    def add(self, item: str) -> None:
        """Append an item."""
        self._lines.append(item)
        self._changed()

    append = add

    def insert(self, index: int, item: str) -> None:
        """Insert an item at ``index``; ``index == len(self)`` appends."""
        index = self._check_index(index, len(self._lines) + 1)
        self._lines.insert(index, item)
        self._changed()

    def remove(self, item: str) -> bool:
        """Remove the first occurrence of ``item``. Returns True if found.

        Under auto-flush the file is rewritten even when nothing matched.
        """
        try:
            self._lines.remove(item)
        except ValueError:
            found = False
        else:
            found = True
        if self._auto_flush:
            self._write()
        elif found:
            self._dirty = True
        return found

    def remove_at(self, index: int) -> None:
        """Remove the item at ``index``."""
        index = self._check_index(index, len(self._lines))
        del self._lines[index]
        self._changed()

    def clear(self) -> None:
        """Remove all items. Under auto-flush the backing file is deleted."""
        self._lines.clear()
        if self._auto_flush:
            self._delete()
        else:
            self._dirty = True

    def set_element(self, index: int, value: str) -> None:
        """Set the item at ``index`` and persist it.

        An unchanged value skips the write. An index past the end pads the
        store with empty lines up to ``index`` before appending ``value``.
        """
        index = operator.index(index)
        if index < 0:
            raise IndexError(f"index {index} out of range for {len(self._lines)} lines")
        if index < len(self._lines):
            if self._lines[index] == value:
                return
            self._lines[index] = value
        else:
            self._lines.extend([""] * (index - len(self._lines)))
            self._lines.append(value)
        self._changed()

    # -- queries -----------------------------------------------------------

    def contains(self, item: str) -> bool:
        return item in self._lines

    def index_of(self, item: str) -> int:
        """Index of the first occurrence of ``item``, or -1."""
        try:
            return self._lines.index(item)
        except ValueError:
            return -1

    def copy_to(self, target: list[str], start: int = 0) -> None:
        """Copy the lines into ``target`` starting at position ``start``."""
        if start < 0:
            raise IndexError(f"start {start} must not be negative")
        if len(target) < start + len(self._lines):
            target.extend([""] * (start + len(self._lines) - len(target)))
        target[start : start + len(self._lines)] = self._lines

    # -- persistence -------------------------------------------------------

    def flush(self) -> None:
        """Write all lines to disk. An empty store deletes the file."""
        if self._lines:
            self._write()
        else:
            self._delete()
        self._dirty = False

    def close(self) -> None:
        """Flush pending deferred changes. Safe to call more than once."""
        if self._closed:
            return
        if not self._auto_flush and self._dirty:
            self.flush()
        self._closed = True
        logger.debug("Closed %s", self._path)

    def __enter__(self) -> ListFile:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
