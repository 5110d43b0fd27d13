from flask import current_app

from .base import ProgressStore
from .memory_store import InMemoryProgressStore
from .json_store import JsonFileProgressStore
from .sql_store import SqlProgressStore
from .synced_store import SyncedProgressStore

STORE_EXTENSION_KEY = "progress_store"


def build_store(config):
    kind = config.get("PROGRESS_STORE", "sql")
    if kind == "sql":
        return SqlProgressStore()
    if kind == "synced":
        return SyncedProgressStore(
            local=JsonFileProgressStore(config["LOCAL_CACHE_DIR"]),
            remote=SqlProgressStore()
        )
    if kind == "memory":
        return InMemoryProgressStore()
    raise ValueError(f"Unknown PROGRESS_STORE {kind!r}")


def get_store():
    return current_app.extensions[STORE_EXTENSION_KEY]
