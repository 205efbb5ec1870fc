"""Plain-text renderings handed back to the conversational front-end."""

from typing import Iterable, Sequence

from laptop_helpdesk.models.catalog import ItemRecord
from laptop_helpdesk.models.order import Order
from laptop_helpdesk.utils.helpers import truncate_text

NO_ORDERS_MESSAGE = "You have no completed orders yet."
NO_SEARCH_RESULTS_MESSAGE = (
    "No laptops found matching your criteria. "
    "Please try a different search or ask about our available options."
)


def format_laptop_options(laptops: Iterable[ItemRecord]) -> str:
    """List every laptop with its configuration."""
    lines = ["## 💻 Available Laptop Options\n"]
    for index, laptop in enumerate(laptops, 1):
        lines.append(f"**{index}. {laptop.display_name}** - ${laptop.price:,}")
        lines.append(f"• Category: {laptop.category.value}")
        lines.append(f"• Processor: {laptop.processor}")
        lines.append(f"• RAM: {laptop.ram}")
        lines.append(f"• Storage: {laptop.storage}")
        if laptop.description:
            lines.append(f"• Description: {laptop.description}")
        lines.append("")
    lines.append(
        "To get personalized recommendations, tell me about your specific needs "
        "(e.g. 'I need a laptop for video editing' or 'Budget under $1500')"
    )
    return "\n".join(lines)


def format_search_results(query: str, laptops: Sequence[ItemRecord]) -> str:
    """Render search hits, or the no-results message."""
    if not laptops:
        return NO_SEARCH_RESULTS_MESSAGE

    lines = [f'## 🔍 Search Results for: "{query}"\n']
    for index, laptop in enumerate(laptops, 1):
        lines.append(f"### {index}. {laptop.display_name} - ${laptop.price:,}")
        lines.append(f"**Category:** {laptop.category.value}")
        lines.append(f"**Specs:** {laptop.processor} | {laptop.ram} | {laptop.storage}")
        if laptop.description:
            lines.append(f"**Description:** {truncate_text(laptop.description, 150)}")
        lines.append("")
    return "\n".join(lines)


def format_order_summary(orders: Sequence[Order]) -> str:
    """Summarize completed orders in submission order."""
    if not orders:
        return NO_ORDERS_MESSAGE

    lines = [f"📋 Your Laptop Orders ({len(orders)} total):\n"]
    for index, order in enumerate(orders, 1):
        employee = order.employee
        cost = f"${order.totalCost:,}" if order.totalCost is not None else "TBD"
        order_date = order.orderDate.strftime("%B %d, %Y") if order.orderDate else "TBD"
        lines.append(f"{index}. {order.id}")
        lines.append(f"👤 Employee: {employee.name if employee else 'Unknown'}")
        lines.append(f"🏢 Department: {employee.department if employee else 'Unknown'}")
        lines.append(f"🔧 Request Type: {order.requestType.value}")
        lines.append(f"💻 Laptop: {order.selectedLaptop}")
        lines.append(f"💰 Cost: {cost}")
        lines.append(f"📅 Order Date: {order_date}")
        lines.append(f"✅ Status: {order.status.value}")
        lines.append("")
    return "\n".join(lines)
