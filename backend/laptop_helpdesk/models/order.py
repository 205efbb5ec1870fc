"""Laptop order data models."""

import re
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from laptop_helpdesk.models.catalog import ItemRecord

# Placeholder for the selected laptop until the order is submitted
UNSELECTED_LAPTOP = "TBD"


def _normalize_label(value: str) -> str:
    return re.sub(r"[\s_\-]+", "", value).lower()


class RequestType(str, Enum):
    """Why a laptop is being requested."""

    NEW_EMPLOYEE_SETUP = "New Employee Setup"
    HARDWARE_REPLACEMENT = "Hardware Replacement"
    UPGRADE_REQUEST = "Upgrade Request"

    @classmethod
    def _missing_(cls, value: object) -> Optional["RequestType"]:
        # Accept "HardwareReplacement", "hardware replacement", "HARDWARE_REPLACEMENT"...
        if not isinstance(value, str):
            return None
        wanted = _normalize_label(value)
        for member in cls:
            if wanted in (_normalize_label(member.value), _normalize_label(member.name)):
                return member
        return None


class OrderStatus(str, Enum):
    """Order status.

    Only PENDING and SUBMITTED are produced by the intake workflow. The
    remaining values are reserved for downstream approval systems and are
    treated as display data.
    """

    PENDING = "pending"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    DENIED = "denied"
    ORDERED = "ordered"


class Employee(BaseModel):
    """Employee the laptop is ordered for."""

    name: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class Order(BaseModel):
    """A laptop order, either in flight (pending) or completed."""

    id: Optional[str] = Field(None, description="Assigned on submission")
    employee: Optional[Employee] = None
    requestType: RequestType
    businessJustification: str = Field(..., min_length=1)
    availableLaptops: tuple[ItemRecord, ...] = Field(
        default=(), description="Catalog snapshot taken when the request was accepted"
    )
    selectedLaptop: str = UNSELECTED_LAPTOP
    deliveryDate: str
    status: OrderStatus = OrderStatus.PENDING
    orderDate: Optional[datetime] = None
    totalCost: Optional[int] = Field(None, ge=0)
    trackingNumber: Optional[str] = None
    finalAmount: Optional[int] = Field(None, ge=0)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "PO-1718000000000-3F9A1C",
                "employee": {"name": "Jane Doe", "department": "Engineering"},
                "requestType": "Hardware Replacement",
                "businessJustification": "Current laptop crashes daily",
                "availableLaptops": [],
                "selectedLaptop": "HP EliteBook 840 G8",
                "deliveryDate": "Within 5-7 business days after approval",
                "status": "submitted",
                "orderDate": "2024-06-10T08:00:00Z",
                "totalCost": 1299,
            }
        },
    )

    @model_validator(mode="after")
    def check_status_fields(self) -> "Order":
        """Reject orders whose fields contradict their status."""
        if self.status is OrderStatus.PENDING:
            if self.id is not None or self.employee is not None or self.orderDate is not None:
                raise ValueError("a pending order cannot carry an id, employee or order date")
        elif self.id is None or self.employee is None or self.orderDate is None:
            raise ValueError(f"a {self.status.value} order requires an id, employee and order date")
        return self

