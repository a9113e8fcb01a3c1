from .base import InputStore, StoredState, StoredStateError
from .json_store import JsonFileStore
from .memory_store import MemoryStore

__all__ = ["InputStore", "JsonFileStore", "MemoryStore", "StoredState", "StoredStateError"]
