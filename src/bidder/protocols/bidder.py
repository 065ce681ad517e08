"""
Bidder Protocol Layer.

This module defines the contracts between an exchange adapter and the
collaborators around it: the currency conversion service it consults for
floor prices, the transport that carries its requests, and the auction
orchestrator that drives it.

Key design principles:
- Adapters depend on behaviour, not on concrete services
- Collaborators are synchronous from the adapter's point of view
- Fatal collaborator failures are exceptions; everything else is a value
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.bidder.model.auction import AuctionRequest, Impression
    from src.bidder.model.bid import BidderResult, NormalizedBid, OutgoingRequest


class CurrencyConversionError(Exception):
    """Raised when an amount cannot be expressed in the requested currency."""


@runtime_checkable
class CurrencyConverter(Protocol):
    """
    Protocol for currency conversion services.

    Semantic Role: Authoritative source of exchange rates
    Relationships:
    - Used by: Request builders normalizing floor prices
    - Context: The auction request may carry request-level rates
    - Failure: Raises CurrencyConversionError when no rate is available
    """

    def convert_currency(
        self,
        amount: Decimal,
        request: AuctionRequest,
        from_currency: str,
        to_currency: str,
    ) -> Decimal:
        """
        Convert an amount between currencies.

        Args:
            amount: Amount expressed in ``from_currency``
            request: Auction request providing conversion context
            from_currency: Source ISO 4217 code
            to_currency: Target ISO 4217 code

        Returns:
            Amount expressed in ``to_currency``

        """
        ...


@runtime_checkable
class Transport(Protocol):
    """
    Protocol for HTTP transports.

    Semantic Role: Carries one outgoing request to the exchange
    Relationships:
    - Used by: The service layer between request and response phases
    - Failure: Transport errors propagate to the caller untouched
    """

    def send(self, request: OutgoingRequest) -> str | bytes | None:
        """
        Execute the request and return the raw response body.

        Returns:
            Response body, or None when the exchange sent no content

        """
        ...


@runtime_checkable
class Bidder(Protocol):
    """
    Protocol for exchange adapters.

    Semantic Role: Two-way translation between the generic auction and one
    exchange's wire dialect
    Relationships:
    - Called by: The auction orchestrator, once per auction
    - Semantic Guarantees: No state carried between calls
    """

    def make_http_requests(
        self, request: AuctionRequest
    ) -> BidderResult[OutgoingRequest]:
        """Translate an auction request into outgoing exchange requests."""
        ...

    def make_bids(
        self, impressions: Sequence[Impression], body: str | bytes | None
    ) -> BidderResult[NormalizedBid]:
        """Translate an exchange response into normalized bids."""
        ...
