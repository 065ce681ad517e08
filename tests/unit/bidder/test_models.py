"""Tests for auction and response models."""

from decimal import Decimal

from src.bidder.enums import BidType
from src.bidder.model.auction import AuctionRequest, Banner, Impression
from src.bidder.model.response import WireResponse


class TestImpression:
    """Test impression model behavior."""

    def test_slot_kind_prefers_banner_then_video(self) -> None:
        """Test slot kind resolution order."""
        both = Impression.model_validate(
            {"id": "1", "banner": {"w": 1, "h": 1}, "video": {}}
        )
        video = Impression.model_validate({"id": "2", "video": {}, "native": {"request": "{}"}})
        native = Impression.model_validate({"id": "3", "native": {"request": "{}"}})
        empty = Impression(id="4")

        assert both.slot_kind == BidType.BANNER
        assert video.slot_kind == BidType.VIDEO
        assert native.slot_kind == BidType.NATIVE
        assert empty.slot_kind is None

    def test_floor_price(self) -> None:
        """Test floor price as a domain primitive."""
        imp = Impression(id="1", bidfloor=Decimal("0.5"), bidfloorcur="EUR")

        assert imp.floor_price.value == Decimal("0.5")
        assert imp.floor_price.currency == "EUR"

    def test_banner_has_size(self) -> None:
        """Test banner size detection."""
        assert Banner(w=300, h=250).has_size
        assert not Banner(w=0, h=250).has_size
        assert not Banner(w=300).has_size
        assert not Banner().has_size


class TestAuctionRequest:
    """Test auction request model behavior."""

    def test_keeps_unknown_fields(self) -> None:
        """Test that shared context the adapters ignore round-trips."""
        request = AuctionRequest.model_validate(
            {"id": "r", "imp": [], "site": {"page": "https://example.com"}}
        )

        assert request.model_dump(exclude_none=True) == {
            "id": "r",
            "imp": [],
            "site": {"page": "https://example.com"},
        }


class TestWireResponse:
    """Test wire response model behavior."""

    def test_bids_flattens_seats(self) -> None:
        """Test that bids from all seats are flattened in order."""
        response = WireResponse.model_validate(
            {
                "seatbid": [
                    {"bid": [{"id": "1"}, None]},
                    None,
                    {"bid": [{"id": "2"}, {"id": "3"}]},
                ]
            }
        )

        assert [bid.id for bid in response.bids] == ["1", "2", "3"]

    def test_bids_empty_without_seats(self) -> None:
        """Test that a response without seats has no bids."""
        assert WireResponse().bids == []
