"""
Action Value Model

An exchange action is an ordered tree. Leaves belong to a closed set of
variants decided when the action is built, so the encoder never has to guess
how to serialize an arbitrary Python object.

Core Classes:
    - Text, SignedInt, UnsignedInt, BigInteger, Boolean, RawBytes, Null: leaves
    - Nested: an embedded ``Action``
    - ActionList: an ordered sequence of values
    - Action: ordered association list of ``(key, value)`` entries

Ordering contract:
    Iterating an ``Action`` always yields entries in insertion order. Keys are
    only ever sorted when an action is built with ``Action.from_unordered``.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..constants import INT64_MIN, UINT64_MAX
from ..engine.exceptions import UnsupportedValueError


# -----------------------------
# Leaf variants
# -----------------------------

@dataclass(frozen=True)
class Text:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise UnsupportedValueError(f"Text expects str, got {type(self.value).__name__}")


@dataclass(frozen=True)
class SignedInt:
    """Integer in the signed 64-bit range."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise UnsupportedValueError(f"SignedInt expects int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value < 2**63:
            raise UnsupportedValueError(f"{self.value} does not fit in int64")


@dataclass(frozen=True)
class UnsignedInt:
    """Integer in the unsigned 64-bit range."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise UnsupportedValueError(f"UnsignedInt expects int, got {type(self.value).__name__}")
        if not 0 <= self.value <= UINT64_MAX:
            raise UnsupportedValueError(f"{self.value} does not fit in uint64")


@dataclass(frozen=True)
class BigInteger:
    """
    Arbitrary-size integer.

    Construction always succeeds; encoding fails with
    ``UnsupportedValueError`` when the value falls outside the 64-bit
    integer family the wire format supports.
    """
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise UnsupportedValueError(f"BigInteger expects int, got {type(self.value).__name__}")


@dataclass(frozen=True)
class Boolean:
    value: bool

    def __post_init__(self):
        if not isinstance(self.value, bool):
            raise UnsupportedValueError(f"Boolean expects bool, got {type(self.value).__name__}")


@dataclass(frozen=True)
class RawBytes:
    value: bytes

    def __post_init__(self):
        if not isinstance(self.value, (bytes, bytearray)):
            raise UnsupportedValueError(f"RawBytes expects bytes, got {type(self.value).__name__}")
        object.__setattr__(self, "value", bytes(self.value))


@dataclass(frozen=True)
class Null:
    """Explicit "no parameters" marker used by some variant-tag fields."""


# -----------------------------
# Containers
# -----------------------------

@dataclass(frozen=True, eq=True)
class Nested:
    value: "Action"


@dataclass(frozen=True, eq=True)
class ActionList:
    items: Tuple["ActionValue", ...]


ActionValue = Union[Text, SignedInt, UnsignedInt, BigInteger, Boolean, RawBytes, Null, Nested, ActionList]

_VARIANTS = (Text, SignedInt, UnsignedInt, BigInteger, Boolean, RawBytes, Null, Nested, ActionList)


def action_value(obj: Any, *, sort_keys: bool = False) -> ActionValue:
    """
    Coerce a Python value into its ``ActionValue`` variant.

    ``bool`` is checked before ``int`` so ``True`` never becomes ``1``.
    Floats and Decimals are rejected: numbers must be converted to wire
    strings or scaled integers first.

    Args:
        obj: Native value, ``Action`` or an existing variant.
        sort_keys: Sort keys of nested mappings (unordered sources only).

    Raises:
        UnsupportedValueError: If ``obj`` has no representation.
    """
    if isinstance(obj, _VARIANTS):
        return obj
    if isinstance(obj, Action):
        return Nested(obj)
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, int):
        if obj < 0:
            return SignedInt(obj) if obj >= INT64_MIN else BigInteger(obj)
        return UnsignedInt(obj) if obj <= UINT64_MAX else BigInteger(obj)
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (bytes, bytearray)):
        return RawBytes(obj)
    if obj is None:
        return Null()
    if isinstance(obj, Mapping):
        if sort_keys:
            return Nested(Action.from_unordered(obj))
        return Nested(Action.from_mapping(obj))
    if isinstance(obj, (list, tuple)):
        return ActionList(tuple(action_value(item, sort_keys=sort_keys) for item in obj))
    raise UnsupportedValueError(f"unsupported action value type: {type(obj).__name__}")


def to_native(value: ActionValue, *, bytes_as_hex: bool = False) -> Any:
    """Convert a variant back into plain Python data (dicts keep entry order)."""
    if isinstance(value, (Text, SignedInt, UnsignedInt, BigInteger, Boolean)):
        return value.value
    if isinstance(value, RawBytes):
        return "0x" + value.value.hex() if bytes_as_hex else value.value
    if isinstance(value, Null):
        return None
    if isinstance(value, Nested):
        return value.value.to_python(bytes_as_hex=bytes_as_hex)
    if isinstance(value, ActionList):
        return [to_native(item, bytes_as_hex=bytes_as_hex) for item in value.items]
    raise UnsupportedValueError(f"unsupported action value variant: {type(value).__name__}")


# -----------------------------
# Action
# -----------------------------

class Action:
    """
    Ordered association list of ``(key, ActionValue)`` entries.

    Iteration order equals insertion order; replacing an existing key keeps
    its original position. Values are coerced with ``action_value`` as they
    are stored.

    Example::

        action = Action().set("type", "order").set("grouping", "na")
        list(action.keys())   # ["type", "grouping"]
    """

    __slots__ = ("_entries",)

    def __init__(self, pairs: Optional[Iterable[Tuple[str, Any]]] = None):
        self._entries: List[Tuple[str, ActionValue]] = []
        for key, value in pairs or ():
            self.set(key, value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Action":
        """Build from a mapping, keeping the mapping's own iteration order."""
        return cls(mapping.items())

    @classmethod
    def from_unordered(cls, mapping: Mapping[str, Any]) -> "Action":
        """
        Build from a mapping whose order carries no meaning.

        Keys are sorted lexicographically at every nesting level so the
        resulting encoding is deterministic.
        """
        action = cls()
        for key in sorted(mapping):
            action.set(key, action_value(mapping[key], sort_keys=True))
        return action

    def set(self, key: str, value: Any) -> "Action":
        if not isinstance(key, str):
            raise UnsupportedValueError(f"action keys must be str, got {type(key).__name__}")
        coerced = action_value(value)
        for index, (existing, _) in enumerate(self._entries):
            if existing == key:
                self._entries[index] = (key, coerced)
                return self
        self._entries.append((key, coerced))
        return self

    def get(self, key: str, default: Optional[ActionValue] = None) -> Optional[ActionValue]:
        for existing, value in self._entries:
            if existing == key:
                return value
        return default

    def __getitem__(self, key: str) -> ActionValue:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def remove(self, key: str) -> ActionValue:
        for index, (existing, value) in enumerate(self._entries):
            if existing == key:
                del self._entries[index]
                return value
        raise KeyError(key)

    def without(self, *keys: str) -> "Action":
        """Return a copy with the given keys dropped."""
        return Action((k, v) for k, v in self._entries if k not in keys)

    def copy(self) -> "Action":
        return Action(self._entries)

    def keys(self) -> List[str]:
        return [key for key, _ in self._entries]

    def values(self) -> List[ActionValue]:
        return [value for _, value in self._entries]

    def items(self) -> List[Tuple[str, ActionValue]]:
        return list(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return any(existing == key for existing, _ in self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._entries)
        return f"Action({{{inner}}})"

    @property
    def action_type(self) -> Optional[str]:
        """The ``type`` tag, if the action carries a text one."""
        tag = self.get("type")
        return tag.value if isinstance(tag, Text) else None

    def to_python(self, *, bytes_as_hex: bool = False) -> Dict[str, Any]:
        return {key: to_native(value, bytes_as_hex=bytes_as_hex) for key, value in self._entries}

    def to_json_value(self) -> Dict[str, Any]:
        """JSON-safe form for request bodies (raw bytes rendered as ``0x`` hex)."""
        return self.to_python(bytes_as_hex=True)
