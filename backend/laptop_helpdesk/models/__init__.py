"""Data models package."""

from laptop_helpdesk.models.catalog import ItemCategory, ItemRecord, ItemSummary, RankedCandidate
from laptop_helpdesk.models.events import (
    HelpdeskEvent,
    ListOrders,
    PerformanceNeeds,
    Query,
    Recommend,
    Requirements,
    StartRequest,
    SubmitOrder,
    parse_event,
)
from laptop_helpdesk.models.order import (
    UNSELECTED_LAPTOP,
    Employee,
    Order,
    OrderStatus,
    RequestType,
)
from laptop_helpdesk.models.request import (
    ErrorResponse,
    HealthResponse,
    RecommendationResponse,
    RequestConfirmation,
    SearchRequest,
    StartRequestBody,
    SubmitOrderBody,
)
from laptop_helpdesk.models.state import (
    IdleState,
    IntakeStage,
    RequestPendingState,
    SessionState,
)

__all__ = [
    # Catalog models
    "ItemCategory",
    "ItemRecord",
    "ItemSummary",
    "RankedCandidate",
    # Order models
    "UNSELECTED_LAPTOP",
    "Employee",
    "Order",
    "OrderStatus",
    "RequestType",
    # Session state
    "IdleState",
    "IntakeStage",
    "RequestPendingState",
    "SessionState",
    # Events
    "HelpdeskEvent",
    "ListOrders",
    "PerformanceNeeds",
    "Query",
    "Recommend",
    "Requirements",
    "StartRequest",
    "SubmitOrder",
    "parse_event",
    # Request/Response models
    "SearchRequest",
    "StartRequestBody",
    "SubmitOrderBody",
    "RequestConfirmation",
    "RecommendationResponse",
    "HealthResponse",
    "ErrorResponse",
]
