"""
TPMN exchange adapter.

Pairs the request builder and response interpreter behind the ``Bidder``
protocol. The adapter is configured once with an endpoint and a currency
converter and keeps no state between auctions.
"""

from collections.abc import Sequence

from pydantic import HttpUrl, TypeAdapter, ValidationError

from src.bidder.adapters.tpmn.data import BIDDER_CURRENCY
from src.bidder.adapters.tpmn.request import TpmnRequestBuilder
from src.bidder.adapters.tpmn.response import TpmnResponseInterpreter
from src.bidder.model.auction import AuctionRequest, Impression
from src.bidder.model.bid import BidderResult, NormalizedBid, OutgoingRequest
from src.bidder.protocols.bidder import CurrencyConverter

_url_adapter = TypeAdapter(HttpUrl)


def validate_url(url: str) -> str:
    """
    Check that a URL is an absolute http(s) URL.

    Returns:
        The URL unchanged

    Raises:
        ValueError: If the URL is not valid

    """
    try:
        _url_adapter.validate_python(url)
    except ValidationError as e:
        raise ValueError(f"URL supplied is not valid: {url}") from e
    return url


class TpmnBidder:
    """
    Adapter between generic auctions and the TPMN exchange.

    Satisfies the Bidder protocol through structural typing.
    """

    def __init__(
        self,
        endpoint_url: str,
        converter: CurrencyConverter,
        settlement_currency: str = BIDDER_CURRENCY,
    ) -> None:
        """
        Initialize the adapter.

        Args:
            endpoint_url: Destination for outgoing requests
            converter: Currency conversion service for floor prices
            settlement_currency: Currency TPMN settles bids in

        Raises:
            ValueError: If the endpoint URL is not valid

        """
        self.endpoint_url = validate_url(endpoint_url)
        self.request_builder = TpmnRequestBuilder(
            self.endpoint_url, converter, settlement_currency
        )
        self.response_interpreter = TpmnResponseInterpreter(settlement_currency)

    def make_http_requests(
        self, request: AuctionRequest
    ) -> BidderResult[OutgoingRequest]:
        """Translate an auction request into the outgoing TPMN request."""
        return self.request_builder.build(request)

    def make_bids(
        self, impressions: Sequence[Impression], body: str | bytes | None
    ) -> BidderResult[NormalizedBid]:
        """
        Translate a TPMN response into normalized bids.

        Args:
            impressions: Impressions of the original auction request
            body: Raw response body

        """
        return self.response_interpreter.interpret(impressions, body)
