"""Error types for listfile.

File system failures surface as the built-in ``OSError`` and bad positions
as ``IndexError``; only conversion failures get a dedicated type.
"""


class ListFileError(Exception):
    """Base class for listfile errors."""


class ConversionError(ListFileError, ValueError):
    """Raised when a value cannot be converted to or from a stored line."""
