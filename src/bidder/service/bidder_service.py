"""
Simple bidder service.

This module provides a clean, exchange-agnostic interface for running one
auction against one exchange. It delegates to exchange-specific adapters
while providing a consistent interface to the rest of the application.
"""

import logging

from src.bidder.adapters.tpmn.bidder import TpmnBidder
from src.bidder.config import BidderConfig
from src.bidder.config import config as default_config
from src.bidder.enums import ExchangeName
from src.bidder.model.auction import AuctionRequest
from src.bidder.model.bid import BidderResult, NormalizedBid
from src.bidder.protocols.bidder import Bidder, CurrencyConverter, Transport

logger = logging.getLogger(__name__)


def make_bidder(
    exchange: str,
    converter: CurrencyConverter,
    settings: BidderConfig | None = None,
) -> Bidder:
    """
    Create the adapter for the specified exchange.

    Args:
        exchange: Exchange to adapt to (currently only "tpmn")
        converter: Currency conversion service for floor prices
        settings: Configuration to use instead of the environment defaults

    Returns:
        Configured adapter

    Raises:
        ValueError: If exchange is not supported or its endpoint is invalid

    """
    settings = settings or default_config

    match exchange.lower():
        case ExchangeName.TPMN:
            return TpmnBidder(
                endpoint_url=settings.tpmn.endpoint_url,
                converter=converter,
                settlement_currency=settings.tpmn.settlement_currency,
            )
        case _:
            raise ValueError(f"Unsupported exchange: {exchange}")


def call_exchange(
    bidder: Bidder, request: AuctionRequest, transport: Transport
) -> BidderResult[NormalizedBid]:
    """
    Run one auction against one exchange.

    Builds the outgoing requests, sends each through the transport, and
    interprets every response against the original impressions. Errors from
    both phases are returned together. Transport failures propagate.
    """
    outgoing = bidder.make_http_requests(request)
    bids: list[NormalizedBid] = []
    errors = list(outgoing.errors)

    if not outgoing.value:
        logger.info(f"No outgoing request for auction {request.id}")

    for http_request in outgoing.value:
        body = transport.send(http_request)
        result = bidder.make_bids(request.imp, body)
        bids.extend(result.value)
        errors.extend(result.errors)

    return BidderResult.of(bids, errors)
