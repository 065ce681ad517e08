"""Ad exchange bidder adapter package."""

from src.bidder.model import AuctionRequest
from src.bidder.service import call_exchange, make_bidder

__all__ = ["AuctionRequest", "call_exchange", "make_bidder"]
