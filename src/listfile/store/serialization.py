"""Conversion between typed values and stored lines."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from listfile.errors import ConversionError

T = TypeVar("T")


def default_serialize(value: Any) -> str:
    """Render a value as its canonical display string.

    Integral floats drop the fractional part, so ``1.0`` and ``1`` both
    store as ``"1"``. ``None`` stores as an empty line.
    """
    if value is None:
        return ""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")


def make_deserializer(item_type: type[T]) -> Callable[[str], T]:
    """Build the default coercion from a stored line into ``item_type``."""
    if item_type is str:
        return lambda text: text  # type: ignore[return-value]
    if item_type is bool:
        return _parse_bool  # type: ignore[return-value]

    def coerce(text: str) -> T:
        return item_type(text.strip())  # type: ignore[call-arg]

    return coerce


@dataclass
class SerializationSettings(Generic[T]):
    """How values are turned into lines and back.

    Either function may raise ``ValueError`` or ``TypeError``; callers see
    those as ``ConversionError``.
    """

    serialize: Callable[[T], str] = default_serialize
    deserialize: Callable[[str], T] = make_deserializer(str)  # type: ignore[assignment]

    @classmethod
    def for_type(cls, item_type: type[T]) -> SerializationSettings[T]:
        return cls(serialize=default_serialize, deserialize=make_deserializer(item_type))

    def to_line(self, value: T) -> str:
        try:
            line = self.serialize(value)
        except (TypeError, ValueError) as e:
            raise ConversionError(f"Cannot serialize {value!r}: {e}") from e
        if not isinstance(line, str):
            raise ConversionError(f"Serializer returned {type(line).__name__}, expected str")
        return line

    def from_line(self, text: str) -> T:
        try:
            return self.deserialize(text)
        except (TypeError, ValueError) as e:
            raise ConversionError(f"Cannot deserialize {text!r}: {e}") from e
