"""Requirement-based laptop recommendations."""

import logging

from laptop_helpdesk.database.catalog_store import CatalogStore
from laptop_helpdesk.models.catalog import ItemRecord
from laptop_helpdesk.models.events import Requirements

logger = logging.getLogger(__name__)

USE_CASE_MATCH_SCORE = 5

NO_RECOMMENDATIONS_MESSAGE = (
    "No laptops found matching your criteria. Please consider adjusting your requirements."
)


class RecommendationService:
    """Filter chain over the read-only catalog.

    Stages run in order, each on the survivors of the previous one:
    budget, category, performance tier, then use-case scoring.
    """

    def __init__(self, catalog: CatalogStore, report_limit: int = 3) -> None:
        self.catalog = catalog
        self.report_limit = report_limit

    def recommend(self, requirements: Requirements) -> list[ItemRecord]:
        """Laptops satisfying ``requirements``, best first. May be empty."""
        candidates = list(self.catalog.get_all())

        if requirements.budget is not None:
            candidates = [laptop for laptop in candidates if laptop.price <= requirements.budget]

        if requirements.category:
            wanted = requirements.category.lower()
            candidates = [
                laptop for laptop in candidates if laptop.category.value.lower() == wanted
            ]

        if requirements.performanceNeeds is not None:
            min_score = requirements.performanceNeeds.min_score
            candidates = [
                laptop for laptop in candidates if laptop.performanceScore >= min_score
            ]

        if requirements.useCase:
            use_case = requirements.useCase.lower()

            def use_case_score(laptop: ItemRecord) -> int:
                tags = " ".join(laptop.useCase).lower()
                return USE_CASE_MATCH_SCORE if use_case in tags else 0

            ranked = sorted(candidates, key=use_case_score, reverse=True)
            logger.info(
                "Recommended %d laptops for use case %r", len(ranked), requirements.useCase
            )
            return ranked

        ranked = sorted(candidates, key=lambda laptop: laptop.performanceScore, reverse=True)
        if requirements.is_empty:
            logger.info(
                "No requirements given, returning all %d laptops by performance", len(ranked)
            )
        else:
            logger.info("Recommended %d laptops by performance", len(ranked))
        return ranked

    def generate_report(self, requirements: Requirements) -> str:
        """Render the top recommendations as a markdown report."""
        recommendations = self.recommend(requirements)

        if not recommendations:
            return NO_RECOMMENDATIONS_MESSAGE

        sections = ["## 💻 Laptop Recommendations\n"]
        for index, laptop in enumerate(recommendations[: self.report_limit], 1):
            sections.append(
                f"### {index}. {laptop.display_name} - ${laptop.price:,}\n"
                f"**Category:** {laptop.category.value} | "
                f"**Performance:** {laptop.performanceScore}/10\n\n"
                f"**Description:** {laptop.description}\n\n"
                f"**Best For:** {laptop.targetAudience}\n\n"
                f"**Key Features:** {', '.join(laptop.pros[:3])}\n\n"
                f"**Specifications:** {laptop.specifications}\n\n"
                "---\n"
            )
        return "\n".join(sections)
