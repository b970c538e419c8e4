from .bases import CanonicalModel
from .signatures import Signature
from .orders import (
    Tif,
    Tpsl,
    Grouping,
    Cloid,
    LimitOrderType,
    TriggerOrderType,
    OrderRequest,
    CancelRequest,
    CancelByCloidRequest,
    ModifyRequest,
    BuilderInfo,
)
from .deploy import PerpDexSchema

__all__ = [
    "CanonicalModel",
    "Signature",
    "Tif",
    "Tpsl",
    "Grouping",
    "Cloid",
    "LimitOrderType",
    "TriggerOrderType",
    "OrderRequest",
    "CancelRequest",
    "CancelByCloidRequest",
    "ModifyRequest",
    "BuilderInfo",
    "PerpDexSchema",
]
