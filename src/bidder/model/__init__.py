"""Bidder data models."""

from src.bidder.model.auction import (
    AuctionRequest,
    Banner,
    Format,
    Impression,
    Native,
    Video,
)
from src.bidder.model.bid import BidderError, BidderResult, NormalizedBid, OutgoingRequest
from src.bidder.model.response import SeatBid, WireBid, WireResponse

__all__ = [
    "AuctionRequest",
    "Banner",
    "BidderError",
    "BidderResult",
    "Format",
    "Impression",
    "Native",
    "NormalizedBid",
    "OutgoingRequest",
    "SeatBid",
    "Video",
    "WireBid",
    "WireResponse",
]
