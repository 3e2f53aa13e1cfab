"""
Integration Event Contracts
Events published by one module and consumed by another
"""
from __future__ import annotations

from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import Field, field_serializer, field_validator

from shared.messaging.integration_event import IntegrationEvent, integration_event

_CENTS = Decimal("0.01")


@integration_event
class ProductPriceChangedIntegrationEvent(IntegrationEvent):
    """
    Snapshot of a product after its price changed.

    Published by the catalog, consumed by the basket to refresh the
    denormalized price of cart lines.
    """

    product_id: UUID
    name: str
    category: List[str] = Field(default_factory=list)
    description: str = ""
    image_file: str = ""
    price: Decimal = Field(gt=0)

    @field_validator("price", mode="after")
    @classmethod
    def _quantize_price(cls, value: Decimal) -> Decimal:
        return value.quantize(_CENTS)

    @field_serializer("price", when_used="json")
    def _price_as_text(self, value: Decimal) -> str:
        return str(value)
