"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog records.

Records are frozen: once the catalog is loaded nothing may change them.
Field names are snake_case in Python and camelCase on the wire, matching
the dataset format (``priceUsd``, ``currencyCode``).

==============================================================================
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Money(BaseModel):
    """
    Currency amount.

    Attributes:
        currency_code: ISO 4217 code (e.g. "USD")
        units: Whole units of the amount
        nanos: Nano (10^-9) units of the amount
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    currency_code: str = Field(..., min_length=1, description="ISO 4217 currency code")
    units: int = Field(default=0, description="Whole units")
    nanos: int = Field(
        default=0,
        ge=-999_999_999,
        le=999_999_999,
        description="Nano units"
    )

    @property
    def amount(self) -> float:
        """Amount as a float, for display only."""
        return self.units + self.nanos / 1_000_000_000


class ProductRecord(BaseModel):
    """
    Product record served by the catalog.

    Attributes:
        id: Unique product identifier
        name: Display name
        description: Free-text description
        picture: Picture reference (file name or URL)
        price_usd: Price
        categories: Ordered category tags

    Example:
        >>> record = ProductRecord.model_validate({
        ...     "id": "OLJCESPC7Z",
        ...     "name": "Explorascope",
        ...     "priceUsd": {"currencyCode": "USD", "units": 101, "nanos": 960000000},
        ... })
        >>> record.price_usd.units
        101
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str = Field(..., min_length=1, description="Product identifier")
    name: str = Field(default="", description="Product name")
    description: str = Field(default="", description="Product description")
    picture: str = Field(default="", description="Picture reference")
    price_usd: Money = Field(..., description="Product price")
    categories: Tuple[str, ...] = Field(default=(), description="Category tags")
