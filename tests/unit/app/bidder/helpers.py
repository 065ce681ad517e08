"""Test helpers for bidder tests."""

import json
from decimal import Decimal
from typing import Any

from src.bidder.model.auction import AuctionRequest, Impression

ENDPOINT_URL = "https://randomurl.com/"


class ImpBuilder:
    """Builder for creating test impressions."""

    def __init__(self) -> None:
        """Initialize with a slotless impression carrying valid TPMN params."""
        self._data: dict[str, Any] = {
            "id": "123",
            "ext": {"bidder": {"inventoryId": 1}},
        }

    def with_id(self, imp_id: str) -> "ImpBuilder":
        """Set the impression ID."""
        self._data["id"] = imp_id
        return self

    def with_banner(
        self,
        w: int | None = None,
        h: int | None = None,
        formats: list[tuple[int, int]] | None = None,
    ) -> "ImpBuilder":
        """Add a banner slot."""
        banner: dict[str, Any] = {}
        if w is not None:
            banner["w"] = w
        if h is not None:
            banner["h"] = h
        if formats is not None:
            banner["format"] = [{"w": fw, "h": fh} for fw, fh in formats]
        self._data["banner"] = banner
        return self

    def with_video(self) -> "ImpBuilder":
        """Add a video slot."""
        self._data["video"] = {"mimes": ["video/mp4"]}
        return self

    def with_native(self, request: str | dict[str, Any]) -> "ImpBuilder":
        """Add a native slot from a raw string or a JSON object."""
        if not isinstance(request, str):
            request = json.dumps(request, separators=(",", ":"))
        self._data["native"] = {"request": request}
        return self

    def with_floor(self, value: str | float, currency: str | None = None) -> "ImpBuilder":
        """Set the floor price."""
        self._data["bidfloor"] = Decimal(str(value))
        if currency is not None:
            self._data["bidfloorcur"] = currency
        return self

    def with_inventory_id(self, inventory_id: Any) -> "ImpBuilder":
        """Set the TPMN inventory identifier."""
        self._data["ext"] = {"bidder": {"inventoryId": inventory_id}}
        return self

    def with_ext(self, ext: Any) -> "ImpBuilder":
        """Replace the whole impression extension."""
        self._data["ext"] = ext
        return self

    def build(self) -> Impression:
        """Build as Impression model."""
        return Impression.model_validate(self._data)


def create_auction_request(*imps: ImpBuilder, **context: Any) -> AuctionRequest:
    """Create an auction request with the given impressions and shared context."""
    return AuctionRequest.model_validate(
        {
            "id": "request-1",
            "imp": [imp.build() for imp in imps],
            "device": {"os": "deviceOs", "ua": "some-ua"},
            **context,
        }
    )


class BidResponseBuilder:
    """Builder for creating test bid response bodies."""

    def __init__(self) -> None:
        """Initialize with a single empty seat."""
        self._bids: list[dict[str, Any] | None] = []
        self._cur: str | None = None

    def with_bid(
        self,
        impid: str = "123",
        price: str | float | None = "1.50",
        bid_id: str = "bid-1",
    ) -> "BidResponseBuilder":
        """Add a bid to the seat."""
        bid: dict[str, Any] = {"id": bid_id, "impid": impid, "adm": "<div/>"}
        if price is not None:
            bid["price"] = float(price)
        self._bids.append(bid)
        return self

    def with_null_bid(self) -> "BidResponseBuilder":
        """Add a null entry to the seat."""
        self._bids.append(None)
        return self

    def with_currency(self, currency: str) -> "BidResponseBuilder":
        """Set the declared response currency."""
        self._cur = currency
        return self

    def build_json(self) -> dict[str, Any]:
        """Build as raw JSON data."""
        data: dict[str, Any] = {
            "id": "response-1",
            "seatbid": [{"seat": "tpmn", "bid": self._bids}],
        }
        if self._cur is not None:
            data["cur"] = self._cur
        return data

    def build(self) -> str:
        """Build as a serialized response body."""
        return json.dumps(self.build_json())
