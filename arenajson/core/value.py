"""
The JSON value model.

A JSON value is exactly one of six frozen dataclasses. Each variant is its own
type, so the payload of one variant can never be read as another's. Values
produced by the parser are backed by an arena and die with its reset; values
built with the ``of`` constructors or ``from_python`` own their storage.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Iterable, Iterator, Mapping, Optional, Union

from ..memory.view import View
from .constants import PAIR_SLOT_SIZE, VALUE_SLOT_SIZE
from .strings import Str


class Variant(Enum):
    """Tag naming the active JSON value variant."""

    ARRAY = "array"
    OBJECT = "object"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True)
class JsonArray:
    """Ordered sequence of values."""

    items: View["JsonValue"]
    variant: ClassVar[Variant] = Variant.ARRAY

    @classmethod
    def of(cls, items: Iterable["JsonValue"]) -> "JsonArray":
        return cls(View(list(items), item_size=VALUE_SLOT_SIZE))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["JsonValue"]:
        return iter(self.items)

    def __getitem__(self, index: int) -> "JsonValue":
        return self.items[index]


@dataclass(frozen=True)
class JsonPair:
    """Object member. Names are not required to be unique."""

    name: Str
    value: "JsonValue"


@dataclass(frozen=True)
class JsonObject:
    """Ordered sequence of members; duplicate names are kept in order."""

    pairs: View[JsonPair]
    variant: ClassVar[Variant] = Variant.OBJECT

    @classmethod
    def of(
        cls, pairs: Iterable[tuple[Union[str, bytes, Str], "JsonValue"]]
    ) -> "JsonObject":
        members = [
            JsonPair(name if isinstance(name, Str) else Str.of(name), value)
            for name, value in pairs
        ]
        return cls(View(members, item_size=PAIR_SLOT_SIZE))

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[JsonPair]:
        return iter(self.pairs)

    def names(self) -> list[Str]:
        return [pair.name for pair in self.pairs]

    def get(self, name: Union[str, bytes, Str], default: Optional["JsonValue"] = None) -> Optional["JsonValue"]:
        """Value of the first member called ``name``."""
        for pair in self.pairs:
            if pair.name.equals(name):
                return pair.value
        return default

    def get_all(self, name: Union[str, bytes, Str]) -> list["JsonValue"]:
        """Values of every member called ``name``, in insertion order."""
        return [pair.value for pair in self.pairs if pair.name.equals(name)]


@dataclass(frozen=True)
class JsonNumber:
    value: float
    variant: ClassVar[Variant] = Variant.NUMBER


@dataclass(frozen=True)
class JsonString:
    value: Str
    variant: ClassVar[Variant] = Variant.STRING

    @classmethod
    def of(cls, text: Union[str, bytes]) -> "JsonString":
        return cls(Str.of(text))

    @property
    def text(self) -> str:
        return self.value.decode(errors="replace")


@dataclass(frozen=True)
class JsonBool:
    value: bool
    variant: ClassVar[Variant] = Variant.BOOLEAN


@dataclass(frozen=True)
class JsonNull:
    variant: ClassVar[Variant] = Variant.NULL


JsonValue = Union[JsonArray, JsonObject, JsonNumber, JsonString, JsonBool, JsonNull]

JSON_VALUE_TYPES = (JsonArray, JsonObject, JsonNumber, JsonString, JsonBool, JsonNull)


def is_json_value(obj: Any) -> bool:
    return isinstance(obj, JSON_VALUE_TYPES)


def from_python(obj: Any) -> JsonValue:
    """
    Build a JSON value from plain Python data.

    ``None``, ``bool``, ``int``/``float``, ``str``/``bytes``, mappings and
    lists/tuples are accepted; existing JSON values are returned unchanged.
    Mapping keys must be strings.
    """
    if is_json_value(obj):
        return obj
    if obj is None:
        return JsonNull()
    if isinstance(obj, bool):
        return JsonBool(obj)
    if isinstance(obj, (int, float)):
        return JsonNumber(float(obj))
    if isinstance(obj, (str, bytes)):
        return JsonString.of(obj)
    if isinstance(obj, Mapping):
        for key in obj:
            if not isinstance(key, (str, bytes)):
                raise TypeError(
                    f"Object keys must be str or bytes, not {type(key).__name__}"
                )
        return JsonObject.of((key, from_python(value)) for key, value in obj.items())
    if isinstance(obj, (list, tuple)):
        return JsonArray.of(from_python(item) for item in obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON representable")


def to_python(
    value: JsonValue,
    object_pairs_hook: Callable[[list[tuple[str, Any]]], Any] = dict,
) -> Any:
    """
    Convert a JSON value to plain Python data.

    Objects are passed to ``object_pairs_hook`` as a list of ``(name, value)``
    pairs; with the default ``dict`` the last duplicate name wins.
    Numbers stay ``float``; strings are decoded as UTF-8 with replacement.
    """
    if isinstance(value, JsonArray):
        return [to_python(item, object_pairs_hook) for item in value]
    if isinstance(value, JsonObject):
        return object_pairs_hook([
            (pair.name.decode(errors="replace"), to_python(pair.value, object_pairs_hook))
            for pair in value
        ])
    if isinstance(value, JsonNumber):
        return value.value
    if isinstance(value, JsonString):
        return value.text
    if isinstance(value, JsonBool):
        return value.value
    if isinstance(value, JsonNull):
        return None
    raise TypeError(f"Not a JSON value: {type(value).__name__}")
