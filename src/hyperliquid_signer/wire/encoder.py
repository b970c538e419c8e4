"""
Canonical Action Encoder

Serializes an ordered action tree into MessagePack, byte for byte as the
exchange's reference signer does. ``msgpack`` picks the smallest tag for each
string length, integer magnitude and container size; this module only turns
the closed ``ActionValue`` variants into the plain objects it packs, keeping
every map in stored order.

Exported helpers
----------------
encode
    Pack an ``Action``, an ``ActionValue`` or a list of values.
"""

from typing import Any, Iterable, Union

import msgpack

from ..constants import INT64_MIN, UINT64_MAX
from ..engine.exceptions import UnsupportedValueError
from .values import (
    Action,
    ActionList,
    ActionValue,
    BigInteger,
    Boolean,
    Nested,
    Null,
    RawBytes,
    SignedInt,
    Text,
    UnsignedInt,
    action_value,
)

Encodable = Union[Action, ActionValue, Iterable[Any]]


def _packable(value: ActionValue) -> Any:
    if isinstance(value, Text):
        return value.value
    if isinstance(value, Boolean):
        return value.value
    if isinstance(value, (SignedInt, UnsignedInt)):
        return value.value
    if isinstance(value, BigInteger):
        if not INT64_MIN <= value.value <= UINT64_MAX:
            raise UnsupportedValueError(f"integer {value.value} exceeds the 64-bit wire range")
        return value.value
    if isinstance(value, RawBytes):
        return value.value
    if isinstance(value, Null):
        return None
    if isinstance(value, Nested):
        return _packable_action(value.value)
    if isinstance(value, ActionList):
        return [_packable(item) for item in value.items]
    raise UnsupportedValueError(f"cannot encode value of type {type(value).__name__}")


def _packable_action(action: Action) -> dict:
    return {key: _packable(value) for key, value in action.items()}


def encode(value: Encodable) -> bytes:
    """
    Encode an action tree into its canonical binary form.

    Args:
        value: An ``Action``, any ``ActionValue``, or a list/tuple whose
            items can be coerced with ``action_value`` (used for envelopes
            such as the multi-sig L1 wrapper).

    Returns:
        bytes: MessagePack encoding with entries in stored order.

    Raises:
        UnsupportedValueError: If any value cannot be represented.
    """
    if isinstance(value, Action):
        obj = _packable_action(value)
    else:
        obj = _packable(action_value(value))
    try:
        return msgpack.packb(obj, use_bin_type=True)
    except (OverflowError, TypeError, ValueError) as exc:
        raise UnsupportedValueError(f"msgpack rejected action: {exc}") from exc
