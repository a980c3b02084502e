"""
Storage collaborator.

Ordered byte-string key-value store on a single SQLite file.
"""

from kvrepl.storage.store import KeyValueStore

__all__ = ["KeyValueStore"]
