"""
TPMN Pydantic Models.

This module implements Pydantic models for the exchange-specific parts of
TPMN traffic: the impression extension carrying the inventory identifier,
and the envelope it arrives in on the generic auction request.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

BIDDER_CURRENCY = "USD"


class InvalidImpressionError(ValueError):
    """Raised when one impression cannot be adapted for TPMN."""


class ExtImpTpmn(BaseModel):
    """
    TPMN impression parameters.

    Outgoing impressions carry this model serialized as their ``ext`` so the
    exchange receives a predictable shape.
    """

    inventory_id: int = Field(alias="inventoryId")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @field_validator("inventory_id", mode="before")
    @classmethod
    def reject_boolean(cls, v: Any) -> Any:
        """Reject booleans, which lax integer parsing would accept as 0 or 1."""
        if isinstance(v, bool):
            raise ValueError("inventoryId must be an integer, not a boolean")
        return v

    @property
    def tag_id(self) -> str:
        """Get the routing tag for the impression."""
        return str(self.inventory_id)

    def to_ext(self) -> dict[str, Any]:
        """Serialize as an outgoing impression extension."""
        return self.model_dump(by_alias=True)


class ImpExtEnvelope(BaseModel):
    """Impression extension as set by the orchestrator: ``{"bidder": {...}}``."""

    bidder: ExtImpTpmn
    prebid: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def parse(cls, ext: dict[str, Any] | None) -> ExtImpTpmn:
        """
        Extract TPMN parameters from an impression extension.

        Raises:
            InvalidImpressionError: If the inventory identifier is missing
                or is not an integer

        """
        try:
            return cls.model_validate(ext or {}).bidder
        except ValidationError as e:
            raise InvalidImpressionError(describe_validation_error(e)) from e


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a validation error into a one-line message."""
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)
