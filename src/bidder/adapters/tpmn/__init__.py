"""TPMN exchange adapter."""

from src.bidder.adapters.tpmn.bidder import TpmnBidder
from src.bidder.adapters.tpmn.data import ExtImpTpmn

__all__ = ["ExtImpTpmn", "TpmnBidder"]
