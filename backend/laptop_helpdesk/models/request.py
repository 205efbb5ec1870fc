"""API request and response models."""

from typing import Optional

from pydantic import BaseModel, Field

from laptop_helpdesk.models.catalog import ItemSummary
from laptop_helpdesk.models.order import RequestType


class SearchRequest(BaseModel):
    """Free-text laptop search."""

    query: str = Field("", max_length=1000, description="What the user is looking for")
    limit: Optional[int] = Field(None, ge=0, description="Maximum results; server default when omitted")

    model_config = {
        "json_schema_extra": {
            "example": {"query": "developer laptop for video editing", "limit": 3}
        }
    }


class StartRequestBody(BaseModel):
    """Laptop request form submission."""

    requestType: str = Field(..., description="New Employee Setup, Hardware Replacement or Upgrade Request")
    justification: str = Field(..., description="Business justification")
    query: Optional[str] = Field(None, description="Optional query narrowing the offered laptops")

    model_config = {
        "json_schema_extra": {
            "example": {
                "requestType": "Hardware Replacement",
                "justification": "Current laptop crashes several times a day",
            }
        }
    }


class SubmitOrderBody(BaseModel):
    """Laptop configuration form submission."""

    employeeName: str
    department: str
    selectedLaptop: str = Field(..., description="Laptop as displayed to the user, e.g. 'HP EliteBook 840 G8'")

    model_config = {
        "json_schema_extra": {
            "example": {
                "employeeName": "Jane Doe",
                "department": "Engineering",
                "selectedLaptop": "HP EliteBook 840 G8",
            }
        }
    }


class RequestConfirmation(BaseModel):
    """Echo of an accepted laptop request."""

    requestType: RequestType
    justification: str
    availableLaptops: list[ItemSummary] = Field(default_factory=list)


class RecommendationResponse(BaseModel):
    """Recommended laptops plus the rendered report."""

    laptops: list[ItemSummary] = Field(default_factory=list)
    report: str
    has_results: bool


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    services: dict[str, str]
