"""Order intake tools, bound to one session."""

import logging

from langchain_core.tools import BaseTool, tool

from laptop_helpdesk.exceptions import NoActiveOrderError, ValidationError
from laptop_helpdesk.services.helpdesk_service import HelpdeskService
from laptop_helpdesk.utils.formatting import format_order_summary

logger = logging.getLogger(__name__)


def create_new_laptop_order_tool(service: HelpdeskService, session_key: str) -> BaseTool:
    """Create a generate_new_laptop_order tool for ``session_key``."""

    @tool
    async def generate_new_laptop_order() -> str:
        """Show a form for the user to request a new laptop.

        Use this tool when the user asks about new laptops, hardware requests,
        or says they need a new laptop. The form collects the request type and
        business justification, so do not ask for them in chat.
        """
        logger.info("generate_new_laptop_order tool called for session: %s", session_key)
        service.request_form(session_key)
        return (
            "💻 I'll help you request a new laptop! A form will appear where you can "
            "provide your business justification and select the type of request."
        )

    return generate_new_laptop_order


def create_start_request_tool(service: HelpdeskService, session_key: str) -> BaseTool:
    """Create a start_laptop_request tool for ``session_key``."""

    @tool
    async def start_laptop_request(request_type: str, justification: str) -> str:
        """Create a laptop request from the submitted request form.

        Starting a request replaces any request the user has not submitted yet.

        Args:
            request_type: New Employee Setup, Hardware Replacement or Upgrade Request
            justification: Business justification for the laptop
        """
        logger.info("start_laptop_request tool called for session: %s", session_key)
        try:
            confirmation = service.start_request(session_key, request_type, justification)
        except ValidationError as e:
            logger.warning("start_laptop_request rejected: %s", e)
            return "Please fill in both the request type and business justification."

        return (
            f"Great! I've created your {confirmation.requestType.value.lower()} request. "
            f"Choose one of the {len(confirmation.availableLaptops)} available laptops "
            "to complete your order."
        )

    return start_laptop_request


def create_submit_order_tool(service: HelpdeskService, session_key: str) -> BaseTool:
    """Create a submit_laptop_order tool for ``session_key``."""

    @tool
    async def submit_laptop_order(employee_name: str, department: str, selected_laptop: str) -> str:
        """Submit the user's pending laptop request with the chosen configuration.

        Args:
            employee_name: Name of the employee receiving the laptop
            department: Employee's department
            selected_laptop: The chosen laptop, e.g. "HP EliteBook 840 G8"
        """
        logger.info("submit_laptop_order tool called for session: %s", session_key)
        try:
            order = service.submit_order(session_key, employee_name, department, selected_laptop)
        except NoActiveOrderError as e:
            return f"Error: {e}"
        except ValidationError as e:
            logger.warning("submit_laptop_order rejected: %s", e)
            return "Please provide the employee name, department and the laptop you selected."

        return (
            f"Your laptop order has been submitted successfully! Order ID: `{order.id}`. "
            f"Laptop: {order.selectedLaptop}. Total: ${order.totalCost:,}."
        )

    return submit_laptop_order


def create_list_orders_tool(service: HelpdeskService, session_key: str) -> BaseTool:
    """Create a list_orders tool for ``session_key``."""

    @tool
    async def list_orders() -> str:
        """List all completed laptop orders for the user.

        Use this tool when the user asks about their orders, purchase history,
        or wants to see what they have ordered.
        """
        logger.info("list_orders tool called for session: %s", session_key)
        return format_order_summary(service.list_orders(session_key))

    return list_orders
