"""Order intake state machine.

    IDLE --start_request--> REQUEST_PENDING --submit_order--> IDLE (+1 completed order)
                              |      ^
                              +------+  start_request replaces the in-flight order

There is no cancel transition: an in-flight order is abandoned only by
starting a new request. Reserved statuses (approved, denied, ordered) are
never produced here.
"""

import logging
from typing import Optional

from laptop_helpdesk.database.catalog_store import CatalogStore
from laptop_helpdesk.database.session_store import SessionStore, check_session_key
from laptop_helpdesk.exceptions import NoActiveOrderError
from laptop_helpdesk.models.catalog import ItemRecord
from laptop_helpdesk.models.events import StartRequest, SubmitOrder, validated
from laptop_helpdesk.models.order import (
    UNSELECTED_LAPTOP,
    Employee,
    Order,
    OrderStatus,
    RequestType,
)
from laptop_helpdesk.models.state import IdleState, RequestPendingState, SessionState
from laptop_helpdesk.services.scoring import ScoringEngine
from laptop_helpdesk.utils.helpers import generate_order_id, utc_now

logger = logging.getLogger(__name__)


def match_selected_laptop(descriptor: str, laptops: tuple[ItemRecord, ...]) -> Optional[ItemRecord]:
    """First laptop whose brand and model both appear in ``descriptor``.

    Matching is lossy by policy: no match simply means no price.
    """
    return next(
        (laptop for laptop in laptops if laptop.brand in descriptor and laptop.model in descriptor),
        None,
    )


class OrderIntakeMachine:
    """Advances a session's in-flight order. The only writer of session state."""

    def __init__(
        self,
        catalog: CatalogStore,
        sessions: SessionStore,
        scoring: ScoringEngine,
        delivery_estimate: str,
        order_id_prefix: str = "PO",
        snapshot_limit: int = 5,
    ) -> None:
        self.catalog = catalog
        self.sessions = sessions
        self.scoring = scoring
        self.delivery_estimate = delivery_estimate
        self.order_id_prefix = order_id_prefix
        self.snapshot_limit = snapshot_limit

    def state_of(self, session_key: str) -> SessionState:
        """Current state, or a fresh idle state for an unseen session (not stored)."""
        check_session_key(session_key)
        return self.sessions.get(session_key) or SessionState()

    def start_request(self, session_key: str, event: StartRequest) -> Order:
        """Accept a new laptop request, replacing any in-flight order."""
        state = self.state_of(session_key)

        if event.query:
            snapshot = tuple(self.scoring.rank(event.query, self.snapshot_limit))
        else:
            snapshot = tuple(self.catalog.get_all())

        order = Order(
            requestType=event.requestType,
            businessJustification=event.justification,
            availableLaptops=snapshot,
            selectedLaptop=UNSELECTED_LAPTOP,
            deliveryDate=self.delivery_estimate,
            status=OrderStatus.PENDING,
        )

        if state.currentOrder is not None:
            logger.info(
                "Session %s: discarding in-flight %s request",
                session_key,
                state.currentOrder.requestType.value,
            )

        self.sessions.set(
            session_key,
            state.model_copy(
                update={"active": RequestPendingState(order=order), "showRequestCard": False}
            ),
        )
        logger.info(
            "Session %s: %s request pending with %d laptops offered",
            session_key,
            event.requestType.value,
            len(snapshot),
        )
        return order

    def require_pending(self, session_key: str) -> tuple[SessionState, Order]:
        """Session state and its in-flight order; NoActiveOrderError when idle."""
        state = self.state_of(session_key)
        if state.currentOrder is None:
            logger.warning("Session %s: submit rejected, no in-flight order", session_key)
            raise NoActiveOrderError(session_key)
        return state, state.currentOrder

    def submit_order(self, session_key: str, event: SubmitOrder) -> Order:
        """Submit the in-flight order; the session returns to idle."""
        state, pending = self.require_pending(session_key)

        selected = match_selected_laptop(event.selectedLaptop, pending.availableLaptops)
        if selected is None:
            logger.warning(
                "Session %s: %r matched no offered laptop, total cost defaults to 0",
                session_key,
                event.selectedLaptop,
            )

        completed = Order(
            requestType=pending.requestType,
            businessJustification=pending.businessJustification,
            availableLaptops=pending.availableLaptops,
            deliveryDate=pending.deliveryDate,
            id=generate_order_id(self.order_id_prefix),
            employee=Employee(name=event.employeeName, department=event.department),
            selectedLaptop=event.selectedLaptop,
            totalCost=selected.price if selected else 0,
            status=OrderStatus.SUBMITTED,
            orderDate=utc_now(),
        )

        self.sessions.set(
            session_key,
            state.model_copy(
                update={
                    "active": IdleState(),
                    "completedOrders": state.completedOrders + (completed,),
                }
            ),
        )
        logger.info(
            "Session %s: order %s submitted for %s (%s), total %d",
            session_key,
            completed.id,
            completed.employee.name,
            completed.employee.department,
            completed.totalCost,
        )
        return completed

    def list_orders(self, session_key: str) -> list[Order]:
        """Completed orders in submission order."""
        return list(self.state_of(session_key).completedOrders)

    def request_form(self, session_key: str) -> None:
        """Ask the front-end to show the laptop request form."""
        state = self.state_of(session_key)
        self.sessions.set(session_key, state.model_copy(update={"showRequestCard": True}))

    def consume_request_card(self, session_key: str) -> bool:
        """Return the request-form hint and clear it."""
        state = self.sessions.get(check_session_key(session_key))
        if state is None or not state.showRequestCard:
            return False
        self.sessions.set(session_key, state.model_copy(update={"showRequestCard": False}))
        return True


def build_start_request(
    request_type: str | RequestType, justification: str, query: Optional[str] = None
) -> StartRequest:
    """Validate raw start-request arguments into an event."""
    return validated(StartRequest, requestType=request_type, justification=justification, query=query)


def build_submit_order(employee_name: str, department: str, selected_laptop: str) -> SubmitOrder:
    """Validate raw submission arguments into an event."""
    return validated(
        SubmitOrder,
        employeeName=employee_name,
        department=department,
        selectedLaptop=selected_laptop,
    )
