"""Per-session intake state."""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from laptop_helpdesk.models.order import Order, OrderStatus


class IntakeStage(str, Enum):
    """Where a session stands in the intake workflow.

    SUBMITTED is never held by a session: a submitted order leaves the
    in-flight slot and the session returns to IDLE.
    """

    IDLE = "idle"
    REQUEST_PENDING = "request_pending"
    SUBMITTED = "submitted"


class IdleState(BaseModel):
    """No order in flight."""

    stage: Literal[IntakeStage.IDLE] = IntakeStage.IDLE

    model_config = ConfigDict(frozen=True)


class RequestPendingState(BaseModel):
    """A request was accepted and is waiting for configuration and submission."""

    stage: Literal[IntakeStage.REQUEST_PENDING] = IntakeStage.REQUEST_PENDING
    order: Order

    model_config = ConfigDict(frozen=True)

    @field_validator("order")
    @classmethod
    def order_must_be_pending(cls, v: Order) -> Order:
        if v.status is not OrderStatus.PENDING:
            raise ValueError("only a pending order can be in flight")
        return v


ActiveState = Annotated[Union[IdleState, RequestPendingState], Field(discriminator="stage")]


class SessionState(BaseModel):
    """Everything the helpdesk remembers about one session.

    Values are frozen; transitions produce a new SessionState.
    """

    active: ActiveState = Field(default_factory=IdleState)
    completedOrders: tuple[Order, ...] = Field(
        default=(), description="Submitted orders in submission order"
    )
    showRequestCard: bool = Field(
        default=False, description="Front-end hint: show the laptop request form"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("completedOrders")
    @classmethod
    def completed_orders_are_submitted(cls, v: tuple[Order, ...]) -> tuple[Order, ...]:
        if any(order.status is OrderStatus.PENDING for order in v):
            raise ValueError("completed orders cannot be pending")
        return v

    @property
    def stage(self) -> IntakeStage:
        return self.active.stage

    @property
    def currentOrder(self) -> Optional[Order]:
        """The in-flight order, or None when idle."""
        if isinstance(self.active, RequestPendingState):
            return self.active.order
        return None
