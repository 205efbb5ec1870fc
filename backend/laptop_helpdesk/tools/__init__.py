"""LangChain tools the intent router can invoke.

- get_laptop_options: List the catalog
- search_laptops: Keyword search over the catalog
- recommend_laptops: Requirement-based recommendation report
- generate_new_laptop_order: Ask the front-end to show the request form
- start_laptop_request: Accept a submitted request form
- submit_laptop_order: Submit the in-flight order
- list_orders: Summarize completed orders
"""

from langchain_core.tools import BaseTool

from laptop_helpdesk.services.helpdesk_service import HelpdeskService
from laptop_helpdesk.tools.catalog_tools import (
    create_laptop_options_tool,
    create_recommend_laptops_tool,
    create_search_laptops_tool,
)
from laptop_helpdesk.tools.order_tools import (
    create_list_orders_tool,
    create_new_laptop_order_tool,
    create_start_request_tool,
    create_submit_order_tool,
)


def build_helpdesk_tools(service: HelpdeskService, session_key: str) -> list[BaseTool]:
    """Every helpdesk tool, with the intake tools bound to ``session_key``."""
    return [
        create_laptop_options_tool(service),
        create_search_laptops_tool(service),
        create_recommend_laptops_tool(service),
        create_new_laptop_order_tool(service, session_key),
        create_start_request_tool(service, session_key),
        create_submit_order_tool(service, session_key),
        create_list_orders_tool(service, session_key),
    ]


__all__ = [
    "build_helpdesk_tools",
    "create_laptop_options_tool",
    "create_search_laptops_tool",
    "create_recommend_laptops_tool",
    "create_new_laptop_order_tool",
    "create_start_request_tool",
    "create_submit_order_tool",
    "create_list_orders_tool",
]
