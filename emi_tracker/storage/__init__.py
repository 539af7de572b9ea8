"""Export and import of portfolio documents."""

from emi_tracker.storage.json_file import EXPORT_VERSION, JsonFileStore, dumps, export_document, loads

__all__ = ["EXPORT_VERSION", "JsonFileStore", "dumps", "export_document", "loads"]
