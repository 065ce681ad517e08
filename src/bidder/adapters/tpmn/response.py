"""
TPMN response interpretation.

This module turns a TPMN bid response into normalized bids. Bids are
classified by looking up the impression they answer in the original
request; bids the request cannot explain are reported and skipped while
their siblings are kept.
"""

import logging
from collections.abc import Sequence

from pydantic import ValidationError

from src.bidder.adapters.tpmn.data import BIDDER_CURRENCY, describe_validation_error
from src.bidder.domain.primitives import Price
from src.bidder.enums import BidType
from src.bidder.model.auction import Impression
from src.bidder.model.bid import BidderError, BidderResult, NormalizedBid
from src.bidder.model.response import WireBid, WireResponse, wire_response_adapter

logger = logging.getLogger(__name__)


class TpmnResponseInterpreter:
    """Interprets TPMN bid responses against the impressions that were offered."""

    def __init__(self, settlement_currency: str = BIDDER_CURRENCY) -> None:
        """
        Initialize the response interpreter.

        Args:
            settlement_currency: Currency every TPMN bid settles in

        """
        self.settlement_currency = settlement_currency

    def interpret(
        self, impressions: Sequence[Impression], body: str | bytes | None
    ) -> BidderResult[NormalizedBid]:
        """
        Decode a response body and normalize its bids.

        An undecodable body yields a single bad-server-response error and no
        bids. An absent body, a JSON null, or a response without seats is a
        plain no-bid.
        """
        if body is None or not body.strip():
            return BidderResult.of([], [])

        try:
            response = wire_response_adapter.validate_json(body)
        except ValidationError as e:
            logger.warning(f"Undecodable TPMN response: {e.error_count()} error(s)")
            return BidderResult.with_error(
                BidderError.bad_server_response(
                    f"Failed to decode: {describe_validation_error(e)}"
                )
            )

        return self.extract_bids(impressions, response)

    def extract_bids(
        self, impressions: Sequence[Impression], response: WireResponse | None
    ) -> BidderResult[NormalizedBid]:
        """Normalize the bids of an already decoded response."""
        if response is None or not response.seatbid:
            return BidderResult.of([], [])

        bids: list[NormalizedBid] = []
        errors: list[BidderError] = []

        for bid in response.bids:
            if not self._is_valid_bid(bid):
                logger.debug(f"Skipping bid {bid.id} with price {bid.price}")
                continue

            bid_type = self._get_bid_type(bid, impressions)
            if bid_type is None:
                errors.append(
                    BidderError.bad_server_response(
                        f"ignoring bid id={bid.id}, request doesn't contain any "
                        f"valid impression with id={bid.impid}"
                    )
                )
                continue

            bids.append(NormalizedBid.of(bid, bid_type, self.settlement_currency))

        if errors:
            logger.warning(f"Ignored {len(errors)} TPMN bid(s) with unknown impressions")
        return BidderResult.of(bids, errors)

    @staticmethod
    def _is_valid_bid(bid: WireBid) -> bool:
        """Check if the bid carries a strictly positive price."""
        return Price.of(None, bid.price).is_valid_bid_price

    @staticmethod
    def _get_bid_type(bid: WireBid, impressions: Sequence[Impression]) -> BidType | None:
        """Get the media type of the first impression the bid answers."""
        for imp in impressions:
            if imp.id == bid.impid:
                return imp.slot_kind
        return None
