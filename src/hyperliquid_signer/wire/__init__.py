from .numeric import to_wire_string, to_scaled_integer, to_int_for_hashing, to_usd_int, to_decimal
from .values import (
    Action,
    ActionValue,
    Text,
    SignedInt,
    UnsignedInt,
    BigInteger,
    Boolean,
    RawBytes,
    Null,
    Nested,
    ActionList,
    action_value,
)
from .encoder import encode

__all__ = [
    "to_wire_string",
    "to_scaled_integer",
    "to_int_for_hashing",
    "to_usd_int",
    "to_decimal",
    "Action",
    "ActionValue",
    "Text",
    "SignedInt",
    "UnsignedInt",
    "BigInteger",
    "Boolean",
    "RawBytes",
    "Null",
    "Nested",
    "ActionList",
    "action_value",
    "encode",
]
