"""
Order Request Models

Typed inputs for the order, cancel and modify action builders. Prices and
sizes are held as ``Decimal`` and only converted to wire strings when the
action is assembled.
"""

import os
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from eth_utils import is_hex, remove_0x_prefix
from pydantic import Field, field_validator

from ..utils import normalize_address
from .bases import CanonicalModel


class Tif(str, Enum):
    """Time in force for limit orders."""
    GTC = "Gtc"
    IOC = "Ioc"
    ALO = "Alo"


class Tpsl(str, Enum):
    TP = "tp"
    SL = "sl"


class Grouping(str, Enum):
    """How the exchange links orders submitted in one action."""
    NA = "na"
    NORMAL_TPSL = "normalTpsl"
    POSITION_TPSL = "positionTpsl"


class Cloid(CanonicalModel):
    """
    Client order id: 16 bytes rendered as ``0x`` + 32 lowercase hex digits.
    """

    raw: str = Field(..., description="0x-prefixed 16-byte hex id")

    @field_validator("raw")
    @classmethod
    def _validate_raw(cls, value: str) -> str:
        body = remove_0x_prefix(value)
        if len(body) != 32 or not is_hex(body):
            raise ValueError(f"cloid must be 16 bytes of hex, got {value!r}")
        return "0x" + body.lower()

    @classmethod
    def from_int(cls, value: int) -> "Cloid":
        if not 0 <= value < 2**128:
            raise ValueError("cloid integer must fit in 16 bytes")
        return cls(raw="0x" + format(value, "032x"))

    @classmethod
    def from_str(cls, value: str) -> "Cloid":
        return cls(raw=value)

    @classmethod
    def random(cls) -> "Cloid":
        return cls(raw="0x" + os.urandom(16).hex())

    def to_raw(self) -> str:
        return self.raw

    def __str__(self) -> str:
        return self.raw


class LimitOrderType(CanonicalModel):
    tif: Tif = Field(..., description="Time in force")


class TriggerOrderType(CanonicalModel):
    """Stop-loss / take-profit trigger."""

    trigger_px: Decimal = Field(..., alias="triggerPx", description="Trigger price")
    is_market: bool = Field(..., alias="isMarket", description="Execute as market once triggered")
    tpsl: Tpsl = Field(..., description="Take profit or stop loss")


class OrderRequest(CanonicalModel):
    """
    A single order as the caller describes it.

    Attributes:
        asset: Exchange asset index.
        is_buy: Side.
        sz: Order size.
        limit_px: Limit price.
        order_type: Limit or trigger parameters.
        reduce_only: Only reduce an existing position.
        cloid: Optional client order id.
    """

    asset: int = Field(..., ge=0, description="Asset index")
    is_buy: bool = Field(..., description="True for buy, False for sell")
    sz: Decimal = Field(..., description="Order size")
    limit_px: Decimal = Field(..., description="Limit price")
    order_type: Union[LimitOrderType, TriggerOrderType]
    reduce_only: bool = Field(default=False)
    cloid: Optional[Cloid] = None


class CancelRequest(CanonicalModel):
    asset: int = Field(..., ge=0)
    oid: int = Field(..., ge=0)


class CancelByCloidRequest(CanonicalModel):
    asset: int = Field(..., ge=0)
    cloid: Cloid


class ModifyRequest(CanonicalModel):
    """Replace a resting order, identified by exchange oid or client id."""

    oid: Union[int, Cloid]
    order: OrderRequest


class BuilderInfo(CanonicalModel):
    """
    Builder fee attached to an order action.

    Attributes:
        builder: Builder address, stored lowercase.
        fee: Fee in tenths of a basis point.
    """

    builder: str
    fee: int = Field(..., ge=0)

    @field_validator("builder")
    @classmethod
    def _lower_builder(cls, value: str) -> str:
        return normalize_address(value)
