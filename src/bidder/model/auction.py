"""
Auction request domain model.

These models represent the generic OpenRTB auction request handed to every
exchange adapter. They are frozen: adapters derive transformed copies with
``model_copy`` and never modify the orchestrator's request in place, so the
same request can be reused for other exchanges.

Fields the adapters do not interpret (site, device, user, ...) are kept as
extra attributes and round-trip unchanged into the outgoing payload.
"""

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from src.bidder.domain.primitives import Price
from src.bidder.enums import BidType

# OpenRTB carries prices as JSON numbers, not strings
WireDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


class Format(BaseModel):
    """Alternative banner size."""

    w: int | None = None
    h: int | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Banner(BaseModel):
    """
    Banner slot descriptor.

    Width and height may be absent or zero, in which case the exchange
    adapter falls back to the first entry of ``format``.
    """

    w: int | None = None
    h: int | None = None
    format: list[Format] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def has_size(self) -> bool:
        """Check if both width and height are set and non-zero."""
        return bool(self.w) and bool(self.h)


class Video(BaseModel):
    """Video slot descriptor, passed through untouched."""

    mimes: list[str] | None = None
    w: int | None = None
    h: int | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Native(BaseModel):
    """Native slot descriptor carrying a serialized native request."""

    request: str
    ver: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Impression(BaseModel):
    """
    One advertising opportunity within an auction request.

    An impression is expected to carry one slot kind. When several are
    present, banner wins over video and video over native.
    """

    id: str
    banner: Banner | None = None
    video: Video | None = None
    native: Native | None = None
    tagid: str | None = None
    bidfloor: WireDecimal | None = None
    bidfloorcur: str | None = None
    ext: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def floor_price(self) -> Price:
        """Get the floor as a domain price."""
        return Price.of(self.bidfloorcur, self.bidfloor)

    @property
    def slot_kind(self) -> BidType | None:
        """Get the media type this impression can be bid on as."""
        if self.banner is not None:
            return BidType.BANNER
        if self.video is not None:
            return BidType.VIDEO
        if self.native is not None:
            return BidType.NATIVE
        return None


class AuctionRequest(BaseModel):
    """
    Auction request shared by all exchanges queried for one ad decision.

    Holds the ordered impressions plus shared context such as currency
    hints. Everything besides the impressions is copied verbatim into each
    exchange's outgoing request.
    """

    id: str | None = None
    imp: list[Impression] = Field(default_factory=list)
    cur: list[str] | None = None
    ext: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
