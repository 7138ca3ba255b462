from .base import PersistenceStore
from .sqlite_store import SQLiteStore, UserDataStore

__all__ = ["PersistenceStore", "SQLiteStore", "UserDataStore"]
