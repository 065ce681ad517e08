"""
Wire response models.

These models parse an OpenRTB bid response as returned by an exchange.
Every list element may be null on the wire; consumers skip null entries
rather than treating them as errors.
"""

from pydantic import BaseModel, ConfigDict, TypeAdapter

from src.bidder.model.auction import WireDecimal


class WireBid(BaseModel):
    """One bid returned by the exchange."""

    id: str | None = None
    impid: str | None = None
    price: WireDecimal | None = None
    adm: str | None = None
    crid: str | None = None
    w: int | None = None
    h: int | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class SeatBid(BaseModel):
    """Bids grouped under one buyer seat."""

    seat: str | None = None
    bid: list[WireBid | None] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class WireResponse(BaseModel):
    """
    OpenRTB bid response body.

    The declared currency is informational; adapters decide the
    settlement currency themselves.
    """

    id: str | None = None
    seatbid: list[SeatBid | None] | None = None
    cur: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def bids(self) -> list[WireBid]:
        """
        Get all bids.

        Flattens all bids from all seats into a single list, skipping
        null seats and null bids.
        """
        result: list[WireBid] = []
        for seat in self.seatbid or []:
            if seat is None:
                continue
            result.extend(bid for bid in seat.bid or [] if bid is not None)
        return result


# A literal JSON null is a valid "no bid" body
wire_response_adapter: TypeAdapter[WireResponse | None] = TypeAdapter(
    WireResponse | None
)
