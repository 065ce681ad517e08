"""Bidder collaborator protocols."""

from src.bidder.protocols.bidder import (
    Bidder,
    CurrencyConversionError,
    CurrencyConverter,
    Transport,
)

__all__ = [
    "Bidder",
    "CurrencyConversionError",
    "CurrencyConverter",
    "Transport",
]
