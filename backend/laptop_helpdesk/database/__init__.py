"""Storage package."""

from laptop_helpdesk.database.catalog_store import CatalogStore, catalog_store
from laptop_helpdesk.database.session_store import (
    InMemorySessionStore,
    SessionStore,
    session_store,
)

__all__ = [
    "CatalogStore",
    "catalog_store",
    "SessionStore",
    "InMemorySessionStore",
    "session_store",
]
