"""
Domain primitives for bidder adaptation.

These primitives provide semantic meaning and rich behavior to values
while maintaining compatibility with the wire layer's neutral types.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Price(BaseModel):
    """
    Represents a floor or bid price with an optional currency.

    Both parts are optional because OpenRTB allows a floor without a
    currency and a bid without a price. Validity checks live here so the
    request and response sides agree on what a usable price is.
    """

    currency: str | None = Field(default=None, description="ISO 4217 currency code")
    value: Decimal | None = Field(default=None, description="Price amount")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, currency: str | None, value: Decimal | None) -> Price:
        """Create a price from a currency and an amount."""
        return cls(currency=currency, value=value)

    @property
    def is_valid_bid_price(self) -> bool:
        """Check if the amount is present and strictly positive."""
        return self.value is not None and self.value > 0

    def should_convert_to(self, currency: str) -> bool:
        """
        Check if this price needs conversion into another currency.

        A price without a positive amount or without a currency is taken
        as-is, as is a price already expressed in the target currency.
        """
        if not self.is_valid_bid_price or not self.currency:
            return False
        code = self.currency.strip()
        return bool(code) and code.upper() != currency.upper()

    def format_display(self) -> str:
        """Format price for display."""
        if self.value is None:
            return "n/a"
        if self.currency:
            return f"{self.value} {self.currency}"
        return f"{self.value}"

    def __str__(self) -> str:
        """String representation."""
        return self.format_display()
