"""API routes for the laptop helpdesk.

Every session-scoped endpoint reads the session key from the
``X-Session-ID`` header.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Header, HTTPException, status
from fastapi.encoders import jsonable_encoder

from laptop_helpdesk.config import get_settings
from laptop_helpdesk.models.catalog import ItemSummary
from laptop_helpdesk.models.events import validated
from laptop_helpdesk.models.order import Order
from laptop_helpdesk.models.request import (
    HealthResponse,
    RecommendationResponse,
    RequestConfirmation,
    SearchRequest,
    StartRequestBody,
    SubmitOrderBody,
)
from laptop_helpdesk.services.helpdesk_service import HelpdeskService, helpdesk_service

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(prefix=settings.api_prefix)


def get_helpdesk_service() -> HelpdeskService:
    """Dependency returning the process-wide helpdesk service."""
    return helpdesk_service


@router.get("/health", response_model=HealthResponse)
async def health_check(service: HelpdeskService = Depends(get_helpdesk_service)) -> HealthResponse:
    """Health check endpoint."""
    try:
        laptops = len(service.catalog.get_all())
    except (OSError, ValueError) as e:
        logger.error("Health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalog unavailable",
        )

    return HealthResponse(
        status="healthy" if laptops else "degraded",
        version=settings.app_version,
        services={
            "catalog": f"{laptops} laptops",
            "sessions": "in-memory",
        },
    )


@router.get("/laptops", response_model=list[ItemSummary])
async def list_laptops(service: HelpdeskService = Depends(get_helpdesk_service)) -> list[ItemSummary]:
    """All available laptop options in catalog order."""
    return service.laptop_options()


@router.post("/laptops/search", response_model=list[ItemSummary])
async def search_laptops(
    body: Optional[dict[str, Any]] = Body(None),
    service: HelpdeskService = Depends(get_helpdesk_service),
) -> list[ItemSummary]:
    """Keyword search; an empty query returns the first laptops in catalog order."""
    request = validated(SearchRequest, **(body or {}))
    return service.search(request.query, request.limit)


@router.post("/laptops/recommendations", response_model=RecommendationResponse)
async def recommend_laptops(
    requirements: Optional[dict[str, Any]] = Body(None),
    service: HelpdeskService = Depends(get_helpdesk_service),
) -> RecommendationResponse:
    """Recommendations for structured requirements; no requirements means the whole catalog."""
    return service.recommend(requirements)


@router.post(
    "/orders/requests",
    response_model=RequestConfirmation,
    status_code=status.HTTP_201_CREATED,
)
async def start_request(
    body: dict[str, Any] = Body(...),
    session_id: str = Header(..., alias="X-Session-ID"),
    service: HelpdeskService = Depends(get_helpdesk_service),
) -> RequestConfirmation:
    """Open a laptop request, replacing any in-flight order for the session."""
    request = validated(StartRequestBody, **body)
    return service.start_request(
        session_id, request.requestType, request.justification, request.query
    )


@router.post("/orders", response_model=Order, status_code=status.HTTP_201_CREATED)
async def submit_order(
    body: dict[str, Any] = Body(...),
    session_id: str = Header(..., alias="X-Session-ID"),
    service: HelpdeskService = Depends(get_helpdesk_service),
) -> Order:
    """Submit the session's in-flight order."""
    # Checked before the form fields so an idle session answers 409
    service.intake.require_pending(session_id)
    request = validated(SubmitOrderBody, **body)
    return service.submit_order(
        session_id, request.employeeName, request.department, request.selectedLaptop
    )


@router.get("/orders", response_model=list[Order])
async def list_orders(
    session_id: str = Header(..., alias="X-Session-ID"),
    service: HelpdeskService = Depends(get_helpdesk_service),
) -> list[Order]:
    """Completed orders for the session in submission order."""
    return service.list_orders(session_id)


@router.post("/events")
async def dispatch_event(
    event: dict[str, Any] = Body(...),
    session_id: str = Header(..., alias="X-Session-ID"),
    service: HelpdeskService = Depends(get_helpdesk_service),
) -> Any:
    """Dispatch a tagged event: query, recommend, start_request, submit_order or list_orders."""
    return jsonable_encoder(service.dispatch(session_id, event))
