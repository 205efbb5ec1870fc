"""Read-only laptop catalog."""

import logging
import threading
from pathlib import Path
from typing import Iterable, Optional

from laptop_helpdesk.config import get_settings
from laptop_helpdesk.models.catalog import ItemRecord

logger = logging.getLogger(__name__)


class CatalogStore:
    """Holds the catalog records in catalog (insertion) order.

    The record sequence is swapped atomically by ``load``/``replace``; readers
    always get a tuple, so a refresh never changes what an earlier caller holds.
    """

    def __init__(self, records: Optional[Iterable[ItemRecord]] = None) -> None:
        self._records: Optional[tuple[ItemRecord, ...]] = (
            tuple(records) if records is not None else None
        )
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._records is not None

    def load(self, file_path: Optional[str | Path] = None) -> tuple[ItemRecord, ...]:
        """Load the catalog from ``file_path`` or the configured catalog file."""
        # Imported here: the services package imports this module
        from laptop_helpdesk.services.data_loader import DataLoader

        path = Path(file_path) if file_path else get_settings().resolved_catalog_file
        records = DataLoader.load_catalog(path)
        self.replace(records)
        logger.info("Catalog loaded from %s: %d laptops", path, len(records))
        return self.get_all()

    def replace(self, records: Iterable[ItemRecord]) -> None:
        """Swap in a refreshed record set."""
        with self._lock:
            self._records = tuple(records)

    def get_all(self) -> tuple[ItemRecord, ...]:
        """All records in catalog order, loading the configured file on first use."""
        if self._records is None:
            self.load()
        return self._records

    def get(self, item_id: str) -> Optional[ItemRecord]:
        """Look up one record by id."""
        return next((record for record in self.get_all() if record.id == item_id), None)


# Global catalog store instance
catalog_store = CatalogStore()
