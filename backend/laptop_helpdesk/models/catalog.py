"""Catalog data models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemCategory(str, Enum):
    """Laptop catalog tiers."""

    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"
    DEVELOPER = "Developer"


class ItemRecord(BaseModel):
    """A laptop in the catalog. Immutable once loaded."""

    id: str = Field(..., min_length=1, description="Unique catalog identifier")
    brand: str = Field(..., min_length=1, description="Manufacturer name")
    model: str = Field(..., min_length=1, description="Model name")
    processor: str
    ram: str = Field(..., description="Memory size, e.g. '16GB DDR4'")
    storage: str = Field(..., description="Storage size, e.g. '512GB SSD'")
    price: int = Field(..., ge=0, description="Price in whole currency units")
    category: ItemCategory
    description: str = ""
    specifications: str = ""
    availability: bool = True
    useCase: tuple[str, ...] = Field(default=(), description="Use-case tags")
    pros: tuple[str, ...] = Field(default=(), description="Selling points")
    targetAudience: str = ""
    performanceScore: int = Field(..., ge=0, le=10)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "hp-elitebook-840",
                "brand": "HP",
                "model": "EliteBook 840 G8",
                "processor": "Intel Core i7-1165G7",
                "ram": "16GB DDR4",
                "storage": "512GB SSD",
                "price": 1299,
                "category": "Standard",
                "description": "Professional business laptop with enhanced performance.",
                "specifications": "14-inch FHD display, Intel Iris Xe Graphics, Windows 11 Pro",
                "availability": True,
                "useCase": ["business analysis", "presentations"],
                "pros": ["Great keyboard", "Strong performance"],
                "targetAudience": "Business analysts, project managers",
                "performanceScore": 8,
            }
        },
    )

    @property
    def display_name(self) -> str:
        """Brand and model, the way users refer to a laptop."""
        return f"{self.brand} {self.model}"

    def searchable_text(self) -> str:
        """Lowercased blob of every free-text field used for keyword scoring."""
        parts = [
            self.brand,
            self.model,
            self.description,
            " ".join(self.useCase),
            self.category.value,
            self.targetAudience,
            " ".join(self.pros),
            self.specifications,
        ]
        return " ".join(parts).lower()


class RankedCandidate(BaseModel):
    """A catalog record paired with its keyword score for one query."""

    item: ItemRecord
    score: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class ItemSummary(BaseModel):
    """Reduced laptop view handed back to callers."""

    brand: str
    model: str
    processor: str
    ram: str
    storage: str
    price: int
    category: ItemCategory
    description: Optional[str] = None

    @classmethod
    def from_record(cls, record: ItemRecord) -> "ItemSummary":
        """Build a summary from a catalog record."""
        return cls(
            brand=record.brand,
            model=record.model,
            processor=record.processor,
            ram=record.ram,
            storage=record.storage,
            price=record.price,
            category=record.category,
            description=record.description or None,
        )
