"""Bidder service layer."""

from src.bidder.service.bidder_service import call_exchange, make_bidder

__all__ = ["call_exchange", "make_bidder"]
