"""Catalog tools: laptop options, search and recommendations."""

import logging
from typing import Optional

from langchain_core.tools import BaseTool, tool

from laptop_helpdesk.exceptions import ValidationError
from laptop_helpdesk.services.helpdesk_service import HelpdeskService
from laptop_helpdesk.utils.formatting import format_laptop_options, format_search_results

logger = logging.getLogger(__name__)


def create_laptop_options_tool(service: HelpdeskService) -> BaseTool:
    """Create a get_laptop_options tool bound to ``service``."""

    @tool
    async def get_laptop_options() -> str:
        """Return a list of the available laptop options and configurations.

        Use this tool when the user asks about laptop specifications,
        available models, or what laptops are available.
        """
        logger.info("get_laptop_options tool called")
        return format_laptop_options(service.catalog.get_all())

    return get_laptop_options


def create_search_laptops_tool(service: HelpdeskService) -> BaseTool:
    """Create a search_laptops tool bound to ``service``."""

    @tool
    async def search_laptops(query: str) -> str:
        """Search for laptops matching the user's requirements.

        Examples of when to use this tool:
        - "which laptops are good for video editing?"
        - "do you have any Lenovo laptops?"
        - "lightweight laptop for presentations"

        Args:
            query: Keywords describing what the user is looking for
        """
        logger.info("search_laptops tool called with query: %s", query)
        laptops = service.scoring.rank(query, service.settings.search_default_limit)
        return format_search_results(query, laptops)

    return search_laptops


def create_recommend_laptops_tool(service: HelpdeskService) -> BaseTool:
    """Create a recommend_laptops tool bound to ``service``."""

    @tool
    async def recommend_laptops(
        use_case: Optional[str] = None,
        budget: Optional[int] = None,
        category: Optional[str] = None,
        performance_needs: Optional[str] = None,
    ) -> str:
        """Recommend laptops for specific requirements.

        Use this tool when the user wants personalized recommendations based
        on their use case, budget, laptop tier, or performance needs.

        Args:
            use_case: What the laptop will be used for, e.g. "video editing"
            budget: Maximum price in dollars
            category: Basic, Standard, Premium or Developer
            performance_needs: low, medium or high
        """
        logger.info(
            "recommend_laptops tool called: use_case=%s budget=%s category=%s performance=%s",
            use_case,
            budget,
            category,
            performance_needs,
        )
        try:
            return service.recommendation_report(
                {
                    "useCase": use_case,
                    "budget": budget,
                    "category": category,
                    "performanceNeeds": performance_needs,
                }
            )
        except ValidationError as e:
            logger.warning("recommend_laptops rejected requirements: %s", e)
            return f"I couldn't use those requirements: {e}. Please adjust them and try again."

    return recommend_laptops
