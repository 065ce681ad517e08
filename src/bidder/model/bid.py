"""
Bidder result models.

These models are what an exchange adapter hands back to the auction
orchestrator: outgoing requests, normalized bids, and the errors collected
while producing them. Adapters never raise for impression- or bid-scoped
problems; they return a ``BidderResult`` carrying both values and errors so
the orchestrator can decide whether partial results are usable.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from src.bidder.enums import BidderErrorType, BidType
from src.bidder.model.auction import AuctionRequest
from src.bidder.model.response import WireBid

T = TypeVar("T")


class BidderError(BaseModel):
    """A non-fatal problem found while adapting a request or response."""

    type: BidderErrorType
    message: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def bad_input(cls, message: str) -> "BidderError":
        """Create an error caused by the caller's request."""
        return cls(type=BidderErrorType.BAD_INPUT, message=message)

    @classmethod
    def bad_server_response(cls, message: str) -> "BidderError":
        """Create an error caused by the exchange's reply."""
        return cls(type=BidderErrorType.BAD_SERVER_RESPONSE, message=message)


class NormalizedBid(BaseModel):
    """
    Exchange bid annotated for the orchestrator.

    Carries the wire bid unchanged together with the media type resolved
    from the original request and the currency the bid settles in.
    """

    bid: WireBid
    type: BidType
    currency: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, bid: WireBid, bid_type: BidType, currency: str) -> "NormalizedBid":
        """Create a normalized bid."""
        return cls(bid=bid, type=bid_type, currency=currency)


class OutgoingRequest(BaseModel):
    """
    One HTTP call to an exchange, ready for the transport.

    ``body`` is the encoded ``payload``; the payload is kept so the
    response phase can inspect what was actually sent.
    """

    method: str = "POST"
    uri: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: bytes
    payload: AuctionRequest
    imp_ids: frozenset[str] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True)


class BidderResult(BaseModel, Generic[T]):
    """Values produced by an adapter call plus the errors collected on the way."""

    value: list[T] = Field(default_factory=list)
    errors: list[BidderError] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, value: list[T], errors: list[BidderError]) -> "BidderResult[T]":
        """Create a result with values and errors."""
        return cls(value=list(value), errors=list(errors))

    @classmethod
    def with_error(cls, error: BidderError) -> "BidderResult[T]":
        """Create a result holding a single error and no values."""
        return cls(errors=[error])
