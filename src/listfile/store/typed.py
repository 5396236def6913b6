"""Typed adapter over a line store."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Generic, TypeVar

from listfile.store.line_store import ListFile
from listfile.store.serialization import SerializationSettings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TypedListFile(Generic[T]):
    """File-backed list of typed values.

    Values are stored as lines through ``SerializationSettings``. Lookups
    compare serialized text, so two values that render the same are equal
    here and values that render differently are not.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        settings: SerializationSettings[T] | None = None,
        auto_flush: bool = True,
        item_type: type[T] | None = None,
        encoding: str = "utf-8",
        store: ListFile | None = None,
    ) -> None:
        """Open ``path``, or adopt an already open ``store``.

        Pass either ``settings`` or ``item_type``; ``item_type`` alone builds
        the default conversions and neither means plain strings.
        """
        if settings is not None and item_type is not None:
            raise ValueError("pass settings or item_type, not both")
        if (path is None) == (store is None):
            raise ValueError("pass exactly one of path or store")
        self._store = store if store is not None else ListFile(path, auto_flush=auto_flush, encoding=encoding)
        self._settings = settings or SerializationSettings.for_type(item_type or str)

    @classmethod
    def wrap(cls, store: ListFile, settings: SerializationSettings[T]) -> TypedListFile[T]:
        """Adopt an already open store. Closing the adapter closes it."""
        return cls(store=store, settings=settings)

    @property
    def store(self) -> ListFile:
        return self._store

    @property
    def settings(self) -> SerializationSettings[T]:
        return self._settings

    @property
    def path(self) -> Path:
        return self._store.path

    @property
    def is_dirty(self) -> bool:
        return self._store.is_dirty

    def __len__(self) -> int:
        return len(self._store)

    def __getitem__(self, index: int) -> T:
        return self._settings.from_line(self._store[index])

    def __setitem__(self, index: int, value: T) -> None:
        self._store[index] = self._settings.to_line(value)

    def __delitem__(self, index: int) -> None:
        self._store.remove_at(index)

    def __iter__(self) -> Iterator[T]:
        lines = iter(self._store)
        return (self._settings.from_line(line) for line in lines)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"TypedListFile({self._store!r})"

    def add(self, value: T) -> None:
        self._store.add(self._settings.to_line(value))

    append = add

    def insert(self, index: int, value: T) -> None:
        self._store.insert(index, self._settings.to_line(value))

    def remove(self, value: T) -> bool:
        return self._store.remove(self._settings.to_line(value))

    def remove_at(self, index: int) -> None:
        self._store.remove_at(index)

    def clear(self) -> None:
        self._store.clear()

    def set_element(self, index: int, value: T) -> None:
        self._store.set_element(index, self._settings.to_line(value))

    def contains(self, value: T) -> bool:
        return self._store.contains(self._settings.to_line(value))

    def index_of(self, value: T) -> int:
        return self._store.index_of(self._settings.to_line(value))

    def copy_to(self, target: list[T], start: int = 0) -> None:
        values = self.to_list()
        if start < 0:
            raise IndexError(f"start {start} must not be negative")
        if len(target) < start + len(values):
            target.extend([None] * (start + len(values) - len(target)))  # type: ignore[list-item]
        target[start : start + len(values)] = values

    def to_list(self) -> list[T]:
        """Deserialize every line eagerly."""
        return list(self)

    def flush(self) -> None:
        self._store.flush()

    def close(self) -> None:
        self._store.close()

    def __enter__(self) -> TypedListFile[T]:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
