"""
Enums for bidder adaptation.

This module defines the standardized enum values used throughout the bidder
adapters. These enums represent the semantic vocabulary of the domain and
establish consistent naming across exchanges and components.

"""

from __future__ import annotations

import enum

# =============================================================================
# EXCHANGE ENUMS
# =============================================================================


class ExchangeName(str, enum.Enum):
    """
    Supported exchange identifiers.

    Used by the service layer to route an auction to the adapter that
    speaks the exchange's wire dialect.
    """

    TPMN = "tpmn"


# =============================================================================
# BID ENUMS
# =============================================================================


class BidType(str, enum.Enum):
    """
    Media type a bid is rendered as.

    Values match the OpenRTB extension vocabulary so they can be
    serialized directly into the orchestrator's bid records.
    """

    BANNER = "banner"
    VIDEO = "video"
    NATIVE = "native"


class BidderErrorType(str, enum.Enum):
    """
    Classification of adapter errors.

    Input errors are caused by the caller's request, server errors by the
    exchange's reply.
    """

    BAD_INPUT = "bad_input"  # Malformed or incomplete request data
    BAD_SERVER_RESPONSE = "bad_server_response"  # Malformed or inconsistent reply
