"""
Bidder Domain Layer.

This package contains domain primitives that provide semantic meaning
and rich behavior to auction values.

Key principles:
- Wire models use neutral types (Decimal, str)
- Adapters use primitives internally for price decisions
"""

from src.bidder.domain.primitives import Price

__all__ = ["Price"]
