"""Process-wide store used by the HTTP handlers."""

import threading

from venues.stores.interfaces import AccountDirectory, Catalog, Ledger
from venues.stores.memory_store import InMemoryStore

_store: InMemoryStore | None = None
_store_lock = threading.Lock()


def get_store() -> InMemoryStore:
    """Return the process store, opening it on first use."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = InMemoryStore().open()
    return _store


def reset_store() -> None:
    """Close the process store; the next ``get_store()`` reloads the demo data."""
    global _store
    with _store_lock:
        if _store is not None:
            _store.close()
        _store = None


__all__ = [
    "AccountDirectory",
    "Catalog",
    "Ledger",
    "InMemoryStore",
    "get_store",
    "reset_store",
]
