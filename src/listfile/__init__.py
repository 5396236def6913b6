"""listfile - lists persisted line-by-line to text files."""

from listfile.errors import ConversionError, ListFileError
from listfile.store import ListFile, SerializationSettings, TypedListFile

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "ListFile",
    "ListFileError",
    "SerializationSettings",
    "TypedListFile",
    "__version__",
]
