"""Shared fixtures: the reference catalog, a fresh session store and service."""

from typing import Any

import pytest

from laptop_helpdesk.config import DEFAULT_CATALOG_FILE, Settings
from laptop_helpdesk.database.catalog_store import CatalogStore
from laptop_helpdesk.database.session_store import InMemorySessionStore
from laptop_helpdesk.models.catalog import ItemRecord
from laptop_helpdesk.services.data_loader import DataLoader
from laptop_helpdesk.services.helpdesk_service import HelpdeskService

SESSION = "session-a"
OTHER_SESSION = "session-b"


def make_record(**overrides: Any) -> ItemRecord:
    """A valid catalog record with sensible defaults."""
    data: dict[str, Any] = {
        "id": "test-laptop",
        "brand": "Acme",
        "model": "Book 1",
        "processor": "Intel Core i5",
        "ram": "8GB",
        "storage": "256GB SSD",
        "price": 1000,
        "category": "Standard",
        "description": "A laptop.",
        "specifications": "13-inch display",
        "availability": True,
        "useCase": ["office work"],
        "pros": ["Light"],
        "targetAudience": "Everyone",
        "performanceScore": 5,
    }
    data.update(overrides)
    return ItemRecord(**data)


@pytest.fixture
def reference_records() -> list[ItemRecord]:
    """The five-laptop reference catalog."""
    return DataLoader.load_catalog(DEFAULT_CATALOG_FILE)


@pytest.fixture
def catalog(reference_records) -> CatalogStore:
    return CatalogStore(reference_records)


@pytest.fixture
def sessions() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def service(catalog, sessions, settings) -> HelpdeskService:
    return HelpdeskService(catalog=catalog, sessions=sessions, settings=settings)


def ids(records) -> list[str]:
    """Catalog ids of records, preserving order."""
    return [record.id for record in records]
