"""
Deployment Models

Typed inputs for the perp deploy builders.
"""

from typing import Optional

from pydantic import Field, field_validator

from ..utils import normalize_address
from .bases import CanonicalModel


class PerpDexSchema(CanonicalModel):
    """
    Schema of a new builder-deployed perp dex.

    Attributes:
        full_name: Display name of the dex.
        collateral_token: Spot token index used as collateral.
        oracle_updater: Address allowed to push oracle prices, stored
            lowercase. ``None`` is sent as an explicit null.
    """

    full_name: str = Field(..., alias="fullName")
    collateral_token: int = Field(..., ge=0, alias="collateralToken")
    oracle_updater: Optional[str] = Field(default=None, alias="oracleUpdater")

    @field_validator("oracle_updater")
    @classmethod
    def _lower_updater(cls, value: Optional[str]) -> Optional[str]:
        return normalize_address(value) if value is not None else None
