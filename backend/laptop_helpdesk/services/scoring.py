"""Keyword scoring over the laptop catalog.

Each query token earns a record:

  +1  if the record's searchable text contains it
  +3  if the brand contains it
  +3  if the model contains it
  +2  if the category contains it
  +2  if any use-case tag contains it

Records scoring 0 are dropped; the rest are ordered by descending score with
ties kept in catalog order.
"""

import logging
from typing import Any

from laptop_helpdesk.database.catalog_store import CatalogStore
from laptop_helpdesk.exceptions import ValidationError
from laptop_helpdesk.models.catalog import ItemRecord, RankedCandidate

logger = logging.getLogger(__name__)

MIN_TOKEN_LENGTH = 3

BLOB_WEIGHT = 1
BRAND_WEIGHT = 3
MODEL_WEIGHT = 3
CATEGORY_WEIGHT = 2
USE_CASE_WEIGHT = 2


def tokenize(query: str) -> list[str]:
    """Lowercase, split on whitespace and drop tokens of two characters or fewer."""
    return [token for token in query.lower().split() if len(token) >= MIN_TOKEN_LENGTH]


def score_record(record: ItemRecord, tokens: list[str]) -> int:
    """Score one record against already tokenized keywords."""
    blob = record.searchable_text()
    brand = record.brand.lower()
    model = record.model.lower()
    category = record.category.value.lower()

    score = 0
    for token in tokens:
        if token in blob:
            score += BLOB_WEIGHT
        if token in brand:
            score += BRAND_WEIGHT
        if token in model:
            score += MODEL_WEIGHT
        if token in category:
            score += CATEGORY_WEIGHT
        if any(token in use_case for use_case in record.useCase):
            score += USE_CASE_WEIGHT
    return score


class ScoringEngine:
    """Ranks catalog records against free-text queries. Never touches session state."""

    def __init__(self, catalog: CatalogStore) -> None:
        self.catalog = catalog

    def score(self, query: str) -> list[RankedCandidate]:
        """Score every record, keep those above zero, best first."""
        tokens = tokenize(query)
        candidates = [
            RankedCandidate(item=record, score=score_record(record, tokens))
            for record in self.catalog.get_all()
        ]
        # sorted() is stable: equal scores keep catalog order
        return sorted(
            (candidate for candidate in candidates if candidate.score > 0),
            key=lambda candidate: candidate.score,
            reverse=True,
        )

    def rank(self, query: Any, limit: int) -> list[ItemRecord]:
        """Return at most ``limit`` records, most relevant first.

        An empty or non-text query skips scoring and returns the first
        ``limit`` records in catalog order.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise ValidationError(f"limit must be a non-negative integer, got {limit!r}")

        if not query or not isinstance(query, str):
            return list(self.catalog.get_all()[:limit])

        ranked = self.score(query)
        logger.info("Query %r matched %d laptops (limit %d)", query, len(ranked), limit)
        return [candidate.item for candidate in ranked[:limit]]
