"""Data loader service for importing the laptop catalog."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from laptop_helpdesk.models.catalog import ItemRecord

logger = logging.getLogger(__name__)


class DataLoader:
    """Service for loading laptop catalog records from JSON files."""

    @staticmethod
    def load_json_file(file_path: str | Path) -> list[dict[str, Any]]:
        """Load raw records from a single JSON file.

        Supports both:
        - Wrapped format: { "laptops": [...] }
        - Flat array: [...]
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if file_path.suffix.lower() != ".json":
            raise ValueError(f"File must be a JSON file: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in file %s: %s", file_path, e)
            raise

        if isinstance(data, dict) and "laptops" in data:
            data = data["laptops"]
        elif isinstance(data, dict):
            data = [data]
        elif not isinstance(data, list):
            raise ValueError("JSON must contain a 'laptops' array, an object, or an array")

        logger.info("Loaded %d records from %s", len(data), file_path)
        return data

    @staticmethod
    def validate_and_parse_records(data: list[dict[str, Any]]) -> list[ItemRecord]:
        """Validate raw records into ItemRecord models.

        Invalid records and duplicate ids are skipped with a warning; the
        first occurrence of an id wins so catalog order is preserved.
        """
        records: list[ItemRecord] = []
        seen_ids: set[str] = set()
        errors = 0

        for idx, item in enumerate(data):
            try:
                record = ItemRecord.model_validate(item)
            except PydanticValidationError as e:
                errors += 1
                logger.warning("Invalid laptop record at index %d: %s", idx, e)
                continue
            if record.id in seen_ids:
                errors += 1
                logger.warning("Duplicate laptop id %s at index %d skipped", record.id, idx)
                continue
            seen_ids.add(record.id)
            records.append(record)

        if errors:
            logger.warning("Failed to parse %d out of %d records", errors, len(data))

        logger.info("Successfully validated %d laptops", len(records))
        return records

    @staticmethod
    def load_catalog(file_path: str | Path) -> list[ItemRecord]:
        """Load and validate a catalog file."""
        raw_data = DataLoader.load_json_file(file_path)
        return DataLoader.validate_and_parse_records(raw_data)
