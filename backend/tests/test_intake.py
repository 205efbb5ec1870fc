"""Tests for the order intake state machine."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from laptop_helpdesk.exceptions import NoActiveOrderError, ValidationError
from laptop_helpdesk.models.order import UNSELECTED_LAPTOP, OrderStatus, RequestType
from laptop_helpdesk.models.state import IntakeStage, SessionState

from conftest import OTHER_SESSION, SESSION, ids


def stage(service, session_key=SESSION) -> IntakeStage:
    return service.intake.state_of(session_key).stage


class TestStartRequest:
    def test_idle_to_request_pending(self, service, sessions, settings):
        assert stage(service) is IntakeStage.IDLE

        confirmation = service.start_request(SESSION, "Hardware Replacement", "laptop crashes")

        assert confirmation.requestType is RequestType.HARDWARE_REPLACEMENT
        assert confirmation.justification == "laptop crashes"
        assert stage(service) is IntakeStage.REQUEST_PENDING

        order = sessions.get(SESSION).currentOrder
        assert order.status is OrderStatus.PENDING
        assert order.selectedLaptop == UNSELECTED_LAPTOP
        assert order.deliveryDate == settings.delivery_estimate
        assert order.id is None
        assert len(order.availableLaptops) == 5

    def test_request_type_spelling_is_tolerant(self, service):
        confirmation = service.start_request(SESSION, "NewEmployeeSetup", "new hire")
        assert confirmation.requestType is RequestType.NEW_EMPLOYEE_SETUP

    @pytest.mark.parametrize(
        "request_type, justification",
        [
            ("Laptop Theft", "stolen"),
            ("", "stolen"),
            ("Upgrade Request", ""),
            ("Upgrade Request", "   "),
            (None, "stolen"),
        ],
    )
    def test_invalid_input_is_rejected_without_state_change(
        self, service, sessions, request_type, justification
    ):
        with pytest.raises(ValidationError):
            service.start_request(SESSION, request_type, justification)
        assert sessions.get(SESSION) is None

    def test_query_narrows_the_snapshot(self, service, sessions):
        service.start_request(SESSION, "Upgrade Request", "need more power", query="apple")

        order = sessions.get(SESSION).currentOrder
        assert ids(order.availableLaptops) == ["apple-macbook-pro-14"]

    def test_second_start_replaces_in_flight_order(self, service, sessions):
        service.start_request(SESSION, "Upgrade Request", "first justification")
        service.start_request(SESSION, "New Employee Setup", "second justification")

        state = sessions.get(SESSION)
        assert state.currentOrder.businessJustification == "second justification"

        service.submit_order(SESSION, "Jane Doe", "Engineering", "Dell Latitude 3420")
        orders = service.list_orders(SESSION)
        assert [o.businessJustification for o in orders] == ["second justification"]

    def test_snapshot_is_independent_of_catalog_changes(self, service, catalog, sessions):
        service.start_request(SESSION, "Hardware Replacement", "broken screen")
        catalog.replace([])

        assert len(sessions.get(SESSION).currentOrder.availableLaptops) == 5

        order = service.submit_order(SESSION, "Jane Doe", "Engineering", "HP EliteBook 840 G8")
        assert order.totalCost == 1299


class TestSubmitOrder:
    def test_full_cycle_appends_one_completed_order(self, service, sessions):
        service.start_request(SESSION, "Hardware Replacement", "laptop crashes")
        order = service.submit_order(SESSION, "Jane Doe", "Engineering", "HP EliteBook 840 G8")

        assert order.status is OrderStatus.SUBMITTED
        assert order.id.startswith("PO-")
        assert order.employee.name == "Jane Doe"
        assert order.employee.department == "Engineering"
        assert order.selectedLaptop == "HP EliteBook 840 G8"
        assert order.totalCost == 1299
        assert order.orderDate is not None
        assert order.businessJustification == "laptop crashes"

        state = sessions.get(SESSION)
        assert state.stage is IntakeStage.IDLE
        assert state.currentOrder is None
        assert state.completedOrders == (order,)

    def test_unmatched_laptop_costs_zero(self, service):
        service.start_request(SESSION, "HardwareReplacement", "laptop crashes")
        order = service.submit_order(SESSION, "Jane Doe", "Engineering", "NonexistentBrand XYZ")

        assert order.totalCost == 0
        assert order.status is OrderStatus.SUBMITTED

    def test_first_matching_laptop_wins(self, service):
        service.start_request(SESSION, "Upgrade Request", "faster builds")
        order = service.submit_order(
            SESSION, "Sam", "Platform", "Apple MacBook Pro 14\" (16GB Unified Memory, 512GB SSD)"
        )
        assert order.totalCost == 2499

    def test_fresh_session_has_no_active_order(self, service, sessions):
        with pytest.raises(NoActiveOrderError):
            service.submit_order(SESSION, "Jane Doe", "Engineering", "HP EliteBook 840 G8")
        assert sessions.get(SESSION) is None

    def test_resubmitting_fails_and_keeps_history(self, service):
        service.start_request(SESSION, "Hardware Replacement", "laptop crashes")
        service.submit_order(SESSION, "Jane Doe", "Engineering", "HP EliteBook 840 G8")

        with pytest.raises(NoActiveOrderError):
            service.submit_order(SESSION, "Jane Doe", "Engineering", "HP EliteBook 840 G8")
        assert len(service.list_orders(SESSION)) == 1

    def test_blank_employee_is_rejected(self, service):
        service.start_request(SESSION, "Hardware Replacement", "laptop crashes")

        with pytest.raises(ValidationError):
            service.submit_order(SESSION, " ", "Engineering", "HP EliteBook 840 G8")
        assert stage(service) is IntakeStage.REQUEST_PENDING

    def test_empty_descriptor_submits_at_zero_cost(self, service):
        service.start_request(SESSION, "Hardware Replacement", "laptop crashes")
        order = service.submit_order(SESSION, "Jane Doe", "Engineering", "")

        assert order.status is OrderStatus.SUBMITTED
        assert order.selectedLaptop == ""
        assert order.totalCost == 0
        assert stage(service) is IntakeStage.IDLE

    def test_descriptor_is_stored_as_typed(self, service):
        service.start_request(SESSION, "Hardware Replacement", "laptop crashes")
        order = service.submit_order(SESSION, "Jane Doe", "Engineering", "  Dell Latitude 3420  ")

        assert order.selectedLaptop == "  Dell Latitude 3420  "
        assert order.totalCost == 899

    def test_idle_session_fails_before_form_fields_are_checked(self, service, sessions):
        with pytest.raises(NoActiveOrderError):
            service.submit_order(SESSION, "", "Engineering", "Dell Latitude 3420")
        assert sessions.get(SESSION) is None

    def test_completed_orders_keep_submission_order_and_unique_ids(self, service):
        for name in ("Ana", "Ben", "Cy"):
            service.start_request(SESSION, "New Employee Setup", f"onboarding {name}")
            service.submit_order(SESSION, name, "Sales", "Dell Latitude 3420")

        orders = service.list_orders(SESSION)
        assert [o.employee.name for o in orders] == ["Ana", "Ben", "Cy"]
        assert len({o.id for o in orders}) == 3

    def test_completed_orders_are_frozen(self, service):
        service.start_request(SESSION, "Hardware Replacement", "laptop crashes")
        order = service.submit_order(SESSION, "Jane Doe", "Engineering", "HP EliteBook 840 G8")

        with pytest.raises(PydanticValidationError):
            order.status = OrderStatus.APPROVED


class TestSessions:
    def test_sessions_are_isolated(self, service):
        service.start_request(SESSION, "Hardware Replacement", "laptop crashes")

        assert stage(service, OTHER_SESSION) is IntakeStage.IDLE
        with pytest.raises(NoActiveOrderError):
            service.submit_order(OTHER_SESSION, "Jane Doe", "Engineering", "HP EliteBook 840 G8")
        assert stage(service) is IntakeStage.REQUEST_PENDING

    def test_list_orders_on_unknown_session_is_empty(self, service, sessions):
        assert service.list_orders("never-seen") == []
        assert sessions.get("never-seen") is None

    def test_blank_session_key_is_rejected(self, service):
        with pytest.raises(ValidationError):
            service.start_request("", "Hardware Replacement", "laptop crashes")


class TestRequestCard:
    def test_request_form_flag_is_consumed_once(self, service):
        assert service.consume_request_card(SESSION) is False

        service.request_form(SESSION)

        assert service.consume_request_card(SESSION) is True
        assert service.consume_request_card(SESSION) is False

    def test_starting_a_request_clears_the_flag(self, service, sessions):
        service.request_form(SESSION)
        service.start_request(SESSION, "Upgrade Request", "more memory")

        assert sessions.get(SESSION).showRequestCard is False

    def test_flag_does_not_create_an_order(self, service, sessions):
        service.request_form(SESSION)
        assert sessions.get(SESSION) == SessionState(showRequestCard=True)
