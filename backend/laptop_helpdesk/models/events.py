"""Tagged events consumed by the helpdesk.

Each variant carries its own validated payload; ``type`` is the tag.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from laptop_helpdesk.exceptions import ValidationError
from laptop_helpdesk.models.order import RequestType


NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class PerformanceNeeds(str, Enum):
    """Minimum performance tier a recommendation must meet."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def min_score(self) -> int:
        return _MIN_PERFORMANCE_SCORE[self]


_MIN_PERFORMANCE_SCORE = {
    PerformanceNeeds.LOW: 0,
    PerformanceNeeds.MEDIUM: 6,
    PerformanceNeeds.HIGH: 8,
}


class Requirements(BaseModel):
    """Structured constraints for a laptop recommendation."""

    useCase: Optional[str] = Field(None, description="Free-text use case, e.g. 'video editing'")
    budget: Optional[int] = Field(None, ge=0, description="Maximum price")
    category: Optional[str] = Field(None, description="Catalog tier, matched case-insensitively")
    performanceNeeds: Optional[PerformanceNeeds] = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("performanceNeeds", mode="before")
    @classmethod
    def lowercase_performance_needs(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("useCase", "category", mode="before")
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_empty(self) -> bool:
        """True when no constraint was given at all."""
        return all(
            value is None
            for value in (self.useCase, self.budget, self.category, self.performanceNeeds)
        )


class Query(BaseModel):
    """Free-text catalog search."""

    type: Literal["query"] = "query"
    query: str = ""
    limit: Optional[int] = Field(None, ge=0)

    model_config = ConfigDict(frozen=True)


class Recommend(BaseModel):
    """Structured recommendation request."""

    type: Literal["recommend"] = "recommend"
    requirements: Requirements = Field(default_factory=Requirements)

    model_config = ConfigDict(frozen=True)


class StartRequest(BaseModel):
    """Open a new laptop request, replacing any in-flight order."""

    type: Literal["start_request"] = "start_request"
    requestType: RequestType
    justification: str = Field(..., min_length=1)
    query: Optional[str] = Field(
        None, description="Narrows the catalog snapshot offered with the request"
    )

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("requestType", mode="before")
    @classmethod
    def parse_request_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return RequestType(v.strip())
        return v


class SubmitOrder(BaseModel):
    """Submit the in-flight order with the user's selections."""

    type: Literal["submit_order"] = "submit_order"
    employeeName: NonBlankStr
    department: NonBlankStr
    # Kept as typed; an empty or unknown descriptor just prices at 0
    selectedLaptop: str

    model_config = ConfigDict(frozen=True)


class ListOrders(BaseModel):
    """Read the session's completed orders."""

    type: Literal["list_orders"] = "list_orders"

    model_config = ConfigDict(frozen=True)


HelpdeskEvent = Annotated[
    Union[Query, Recommend, StartRequest, SubmitOrder, ListOrders],
    Field(discriminator="type"),
]

_event_adapter = TypeAdapter(HelpdeskEvent)


def describe_errors(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def validated(model: type[BaseModel], **payload: Any) -> Any:
    """Build ``model`` from ``payload``, raising the domain ValidationError."""
    try:
        return model(**payload)
    except PydanticValidationError as e:
        raise ValidationError(describe_errors(e)) from e


def parse_event(payload: dict[str, Any]) -> HelpdeskEvent:
    """Parse a raw ``{"type": ..., ...}`` mapping into a tagged event."""
    try:
        return _event_adapter.validate_python(payload)
    except PydanticValidationError as e:
        raise ValidationError(describe_errors(e)) from e
