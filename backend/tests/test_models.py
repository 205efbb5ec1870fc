"""Tests for order, state and event models."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from laptop_helpdesk.exceptions import ValidationError
from laptop_helpdesk.models.catalog import ItemSummary
from laptop_helpdesk.models.events import (
    ListOrders,
    PerformanceNeeds,
    Query,
    Recommend,
    Requirements,
    StartRequest,
    SubmitOrder,
    parse_event,
)
from laptop_helpdesk.models.order import Employee, Order, OrderStatus, RequestType
from laptop_helpdesk.models.state import (
    IntakeStage,
    RequestPendingState,
    SessionState,
)

from conftest import make_record


def pending_order(**overrides) -> Order:
    data = {
        "requestType": RequestType.UPGRADE_REQUEST,
        "businessJustification": "more memory",
        "deliveryDate": "soon",
    }
    data.update(overrides)
    return Order(**data)


def submitted_order(**overrides) -> Order:
    data = {
        "id": "PO-1",
        "employee": Employee(name="Jane Doe", department="Engineering"),
        "status": OrderStatus.SUBMITTED,
        "orderDate": datetime(2024, 6, 10, tzinfo=UTC),
        "totalCost": 899,
    }
    data.update(overrides)
    return pending_order(**data)


class TestRequestType:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("New Employee Setup", RequestType.NEW_EMPLOYEE_SETUP),
            ("NewEmployeeSetup", RequestType.NEW_EMPLOYEE_SETUP),
            ("hardware replacement", RequestType.HARDWARE_REPLACEMENT),
            ("UPGRADE_REQUEST", RequestType.UPGRADE_REQUEST),
            ("upgrade-request", RequestType.UPGRADE_REQUEST),
        ],
    )
    def test_tolerant_parsing(self, raw, expected):
        assert RequestType(raw) is expected

    def test_unknown_value(self):
        with pytest.raises(ValueError):
            RequestType("Loaner")


class TestOrder:
    def test_pending_order_defaults(self):
        order = pending_order()
        assert order.status is OrderStatus.PENDING
        assert order.selectedLaptop == "TBD"
        assert order.availableLaptops == ()

    def test_pending_order_cannot_carry_an_id(self):
        with pytest.raises(PydanticValidationError):
            pending_order(id="PO-1")

    def test_submitted_order_requires_id_and_employee(self):
        with pytest.raises(PydanticValidationError):
            submitted_order(id=None)
        with pytest.raises(PydanticValidationError):
            submitted_order(employee=None)

    def test_reserved_statuses_are_display_values(self):
        order = submitted_order(status=OrderStatus.APPROVED, trackingNumber="1Z999", finalAmount=850)
        assert order.status is OrderStatus.APPROVED

    def test_negative_cost_rejected(self):
        with pytest.raises(PydanticValidationError):
            submitted_order(totalCost=-1)


class TestSessionState:
    def test_default_state_is_idle(self):
        state = SessionState()
        assert state.stage is IntakeStage.IDLE
        assert state.currentOrder is None
        assert state.completedOrders == ()
        assert state.showRequestCard is False

    def test_request_pending_exposes_order(self):
        order = pending_order()
        state = SessionState(active=RequestPendingState(order=order))
        assert state.stage is IntakeStage.REQUEST_PENDING
        assert state.currentOrder is order

    def test_submitted_order_cannot_be_in_flight(self):
        with pytest.raises(PydanticValidationError):
            RequestPendingState(order=submitted_order())

    def test_pending_order_cannot_be_completed(self):
        with pytest.raises(PydanticValidationError):
            SessionState(completedOrders=(pending_order(),))


class TestRequirements:
    def test_empty(self):
        assert Requirements().is_empty
        assert Requirements(useCase="  ", category="").is_empty

    def test_not_empty(self):
        assert not Requirements(budget=0).is_empty

    def test_performance_needs_min_scores(self):
        assert [n.min_score for n in PerformanceNeeds] == [0, 6, 8]

    def test_invalid_performance_needs(self):
        with pytest.raises(PydanticValidationError):
            Requirements(performanceNeeds="extreme")

    def test_negative_budget(self):
        with pytest.raises(PydanticValidationError):
            Requirements(budget=-5)


class TestParseEvent:
    def test_each_variant(self):
        assert isinstance(parse_event({"type": "query", "query": "dell"}), Query)
        assert isinstance(
            parse_event({"type": "recommend", "requirements": {"budget": 1500}}), Recommend
        )
        assert isinstance(
            parse_event(
                {"type": "start_request", "requestType": "Upgrade Request", "justification": "x"}
            ),
            StartRequest,
        )
        assert isinstance(
            parse_event(
                {
                    "type": "submit_order",
                    "employeeName": "Jane",
                    "department": "Ops",
                    "selectedLaptop": "Dell Latitude 3420",
                }
            ),
            SubmitOrder,
        )
        assert isinstance(parse_event({"type": "list_orders"}), ListOrders)

    def test_unknown_tag(self):
        with pytest.raises(ValidationError):
            parse_event({"type": "cancel"})

    def test_missing_payload_field(self):
        with pytest.raises(ValidationError, match="justification"):
            parse_event({"type": "start_request", "requestType": "Upgrade Request"})


class TestItemRecord:
    def test_searchable_text_is_lowercase(self):
        record = make_record(brand="Acme", useCase=["Video Editing"])
        text = record.searchable_text()
        assert "acme" in text
        assert "video editing" in text
        assert text == text.lower()

    def test_performance_score_bounds(self):
        with pytest.raises(PydanticValidationError):
            make_record(performanceScore=11)

    def test_summary_drops_internal_fields(self):
        summary = ItemSummary.from_record(make_record(description=""))
        assert summary.description is None
        assert "performanceScore" not in summary.model_dump()
