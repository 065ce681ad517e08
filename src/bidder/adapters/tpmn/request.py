"""
TPMN request building.

This module turns a generic auction request into the single batched request
TPMN expects. Each impression is adapted independently:

- impression parameters are parsed into ``ExtImpTpmn``
- floors are converted into the settlement currency
- banners without a size borrow the first format entry
- native requests are wrapped in a top-level ``native`` object

An impression that cannot be adapted is reported as a bad-input error and
left out; the rest of the batch is still sent.
"""

import json
import logging
from typing import Any

from src.bidder.adapters.tpmn.data import (
    BIDDER_CURRENCY,
    ExtImpTpmn,
    ImpExtEnvelope,
    InvalidImpressionError,
)
from src.bidder.domain.primitives import Price
from src.bidder.enums import BidType
from src.bidder.model.auction import AuctionRequest, Banner, Impression, Native
from src.bidder.model.bid import BidderError, BidderResult, OutgoingRequest
from src.bidder.protocols.bidder import CurrencyConverter

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json;charset=utf-8",
    "Accept": "application/json",
}


class TpmnRequestBuilder:
    """
    Builds outgoing TPMN requests.

    Holds only the immutable endpoint and converter it was created with,
    so one instance can serve concurrent auctions.
    """

    def __init__(
        self,
        endpoint_url: str,
        converter: CurrencyConverter,
        settlement_currency: str = BIDDER_CURRENCY,
    ) -> None:
        """
        Initialize the request builder.

        Args:
            endpoint_url: Destination for outgoing requests
            converter: Currency conversion service for floor prices
            settlement_currency: Currency floors are sent in

        """
        self.endpoint_url = endpoint_url
        self.converter = converter
        self.settlement_currency = settlement_currency

    def build(self, request: AuctionRequest) -> BidderResult[OutgoingRequest]:
        """
        Build the outgoing request for an auction.

        Returns at most one request carrying every impression that could be
        adapted, plus one bad-input error per impression that could not.
        A currency conversion failure is raised and aborts the whole call.
        """
        valid_imps: list[Impression] = []
        errors: list[BidderError] = []

        for imp in request.imp:
            try:
                ext_imp = ImpExtEnvelope.parse(imp.ext)
                updated_imp = self._modify_imp(imp, ext_imp, request)
            except InvalidImpressionError as e:
                logger.debug(f"Dropping impression {imp.id}: {e}")
                errors.append(BidderError.bad_input(str(e)))
                continue

            if updated_imp is None:
                logger.debug(f"Dropping impression {imp.id}: no banner, video or native")
                continue
            valid_imps.append(updated_imp)

        if not valid_imps:
            return BidderResult.of([], errors)

        outgoing = self._make_request(request.model_copy(update={"imp": valid_imps}))
        logger.info(
            f"Built TPMN request with {len(valid_imps)} of {len(request.imp)} impressions"
        )
        return BidderResult.of([outgoing], errors)

    def _modify_imp(
        self, imp: Impression, ext_imp: ExtImpTpmn, request: AuctionRequest
    ) -> Impression | None:
        """Adapt one impression, or return None if it has no usable slot."""
        floor = self._resolve_bid_floor(imp, request)

        update: dict[str, Any]
        match imp.slot_kind:
            case None:
                return None
            case BidType.BANNER:
                update = {
                    "banner": self._modify_banner(imp.banner),  # type: ignore[arg-type]
                    "video": None,
                    "native": None,
                }
            case BidType.VIDEO:
                update = {"native": None}
            case BidType.NATIVE:
                update = {"native": self._modify_native(imp.native)}  # type: ignore[arg-type]

        update.update(
            tagid=ext_imp.tag_id,
            bidfloor=floor.value,
            bidfloorcur=floor.currency,
            ext=ext_imp.to_ext(),
        )
        return imp.model_copy(update=update)

    def _resolve_bid_floor(self, imp: Impression, request: AuctionRequest) -> Price:
        """Express the impression floor in the settlement currency."""
        floor = imp.floor_price
        if not floor.should_convert_to(self.settlement_currency):
            return floor

        converted = self.converter.convert_currency(
            floor.value,  # type: ignore[arg-type]
            request,
            floor.currency,  # type: ignore[arg-type]
            self.settlement_currency,
        )
        logger.debug(
            f"Converted floor of impression {imp.id} from {floor} "
            f"to {converted} {self.settlement_currency}"
        )
        return Price.of(self.settlement_currency, converted)

    @staticmethod
    def _modify_banner(banner: Banner) -> Banner:
        """Fill in banner size from the first format when missing."""
        if banner.has_size:
            return banner

        if not banner.format:
            raise InvalidImpressionError("Size information missing for banner")

        first_format = banner.format[0]
        return banner.model_copy(update={"w": first_format.w, "h": first_format.h})

    @staticmethod
    def _modify_native(native: Native) -> Native:
        """Wrap the native request in a top-level ``native`` object."""
        try:
            request_node = json.loads(native.request)
        except json.JSONDecodeError as e:
            raise InvalidImpressionError(str(e)) from e

        if isinstance(request_node, dict) and "native" in request_node:
            return native

        wrapped = json.dumps({"native": request_node}, separators=(",", ":"))
        return native.model_copy(update={"request": wrapped})

    def _make_request(self, payload: AuctionRequest) -> OutgoingRequest:
        """Encode the adapted auction as a POST to the endpoint."""
        return OutgoingRequest(
            method="POST",
            uri=self.endpoint_url,
            headers=dict(DEFAULT_HEADERS),
            body=payload.model_dump_json(exclude_none=True).encode("utf-8"),
            payload=payload,
            imp_ids=frozenset(imp.id for imp in payload.imp),
        )
