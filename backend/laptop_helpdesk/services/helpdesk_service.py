"""Helpdesk service: the operations exposed to the intent router.

Informational calls (search, recommend) go to the scoring engine and the
filter chain, which only read the catalog. Intake calls go to the order
intake state machine, which owns all writes to session state.
"""

import logging
from typing import Any, Optional, Union

from laptop_helpdesk.config import Settings, get_settings
from laptop_helpdesk.database.catalog_store import CatalogStore, catalog_store
from laptop_helpdesk.database.session_store import SessionStore, session_store
from laptop_helpdesk.exceptions import ValidationError
from laptop_helpdesk.models.catalog import ItemSummary
from laptop_helpdesk.models.events import (
    ListOrders,
    Query,
    Recommend,
    Requirements,
    StartRequest,
    SubmitOrder,
    parse_event,
    validated,
)
from laptop_helpdesk.models.order import Order, RequestType
from laptop_helpdesk.models.request import RecommendationResponse, RequestConfirmation
from laptop_helpdesk.services.intake import (
    OrderIntakeMachine,
    build_start_request,
    build_submit_order,
)
from laptop_helpdesk.services.recommendation import RecommendationService
from laptop_helpdesk.services.scoring import ScoringEngine

logger = logging.getLogger(__name__)

DispatchResult = Union[
    list[ItemSummary], RecommendationResponse, RequestConfirmation, Order, list[Order]
]


class HelpdeskService:
    """Facade over the scoring engine, filter chain and intake state machine."""

    def __init__(
        self,
        catalog: Optional[CatalogStore] = None,
        sessions: Optional[SessionStore] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.catalog = catalog if catalog is not None else catalog_store
        self.sessions = sessions if sessions is not None else session_store

        self.scoring = ScoringEngine(self.catalog)
        self.recommendations = RecommendationService(
            self.catalog, report_limit=self.settings.recommendation_report_limit
        )
        self.intake = OrderIntakeMachine(
            catalog=self.catalog,
            sessions=self.sessions,
            scoring=self.scoring,
            delivery_estimate=self.settings.delivery_estimate,
            order_id_prefix=self.settings.order_id_prefix,
            snapshot_limit=self.settings.search_default_limit,
        )

    # ── Informational operations ───────────────────────────────────────────────

    def search(self, query: Any, limit: Optional[int] = None) -> list[ItemSummary]:
        """Keyword search over the catalog."""
        if limit is None:
            limit = self.settings.search_default_limit
        return [ItemSummary.from_record(record) for record in self.scoring.rank(query, limit)]

    def laptop_options(self) -> list[ItemSummary]:
        """Every laptop in the catalog, in catalog order."""
        return [ItemSummary.from_record(record) for record in self.catalog.get_all()]

    def recommend(
        self, requirements: Union[Requirements, dict[str, Any], None] = None
    ) -> RecommendationResponse:
        """Recommended laptops together with the rendered report."""
        requirements = self._requirements(requirements)
        laptops = self.recommendations.recommend(requirements)
        return RecommendationResponse(
            laptops=[ItemSummary.from_record(laptop) for laptop in laptops],
            report=self.recommendations.generate_report(requirements),
            has_results=bool(laptops),
        )

    def recommendation_report(
        self, requirements: Union[Requirements, dict[str, Any], None] = None
    ) -> str:
        """Markdown recommendation report only."""
        return self.recommendations.generate_report(self._requirements(requirements))

    # ── Intake operations ──────────────────────────────────────────────────────

    def start_request(
        self,
        session_key: str,
        request_type: Union[str, RequestType],
        justification: str,
        query: Optional[str] = None,
    ) -> RequestConfirmation:
        """Open a laptop request for the session, replacing any in-flight one."""
        return self._start(session_key, build_start_request(request_type, justification, query))

    def submit_order(
        self,
        session_key: str,
        employee_name: str,
        department: str,
        selected_laptop: str,
    ) -> Order:
        """Submit the session's in-flight order."""
        # An idle session fails as such before the form fields are checked
        self.intake.require_pending(session_key)
        return self.intake.submit_order(
            session_key, build_submit_order(employee_name, department, selected_laptop)
        )

    def list_orders(self, session_key: str) -> list[Order]:
        """Completed orders for the session, oldest first."""
        return self.intake.list_orders(session_key)

    def request_form(self, session_key: str) -> None:
        """Flag that the laptop request form should be shown."""
        self.intake.request_form(session_key)

    def consume_request_card(self, session_key: str) -> bool:
        """Read and clear the request-form flag."""
        return self.intake.consume_request_card(session_key)

    # ── Event dispatch ─────────────────────────────────────────────────────────

    def dispatch(self, session_key: str, event: Any) -> DispatchResult:
        """Route a tagged event (or a raw ``{"type": ...}`` mapping) to its operation."""
        if isinstance(event, dict):
            if event.get("type") == "submit_order":
                self.intake.require_pending(session_key)
            event = parse_event(event)

        logger.debug("Session %s: dispatching %s", session_key, type(event).__name__)

        if isinstance(event, Query):
            return self.search(event.query, event.limit)
        if isinstance(event, Recommend):
            return self.recommend(event.requirements)
        if isinstance(event, StartRequest):
            return self._start(session_key, event)
        if isinstance(event, SubmitOrder):
            return self.intake.submit_order(session_key, event)
        if isinstance(event, ListOrders):
            return self.list_orders(session_key)
        raise ValidationError(f"Unsupported event: {type(event).__name__}")

    # ── Helpers ────────────────────────────────────────────────────────────────

    def _start(self, session_key: str, event: StartRequest) -> RequestConfirmation:
        order = self.intake.start_request(session_key, event)
        return RequestConfirmation(
            requestType=order.requestType,
            justification=order.businessJustification,
            availableLaptops=[ItemSummary.from_record(laptop) for laptop in order.availableLaptops],
        )

    @staticmethod
    def _requirements(requirements: Union[Requirements, dict[str, Any], None]) -> Requirements:
        if requirements is None:
            return Requirements()
        if isinstance(requirements, Requirements):
            return requirements
        if not isinstance(requirements, dict):
            raise ValidationError("Requirements must be a mapping")
        return validated(Requirements, **requirements)


# Global helpdesk service instance
helpdesk_service = HelpdeskService()
