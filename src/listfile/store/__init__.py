"""File-backed list stores."""

from listfile.store.line_store import ListFile
from listfile.store.serialization import SerializationSettings
from listfile.store.typed import TypedListFile

__all__ = ["ListFile", "SerializationSettings", "TypedListFile"]
