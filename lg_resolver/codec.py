"""
Value Codec

Converts entity values to and from the LG service's tagged wire values.

On the wire a value is a dict with a "kind" discriminant and a singleton array
under the key that matches the kind:

    {"kind": 0, "stringValues": ["paris"]}
    {"kind": 1, "intValues": [3]}
    {"kind": 2, "floatValues": [2.5]}
    {"kind": 3, "booleanValues": [true]}
    {"kind": 4, "dateTimeValues": ["2019-01-01T10:00:00"]}

In Python each kind is its own frozen dataclass, so a value can never carry
the wrong array for its kind.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, ClassVar, Dict, Optional, Type, Union

from lg_resolver.exceptions import MalformedWireValueError, UnsupportedValueTypeError


@dataclass(frozen=True)
class StringValue:
    value: str

    kind: ClassVar[int] = 0
    field_name: ClassVar[str] = "stringValues"

    def to_wire(self) -> Dict[str, Any]:
        return {"kind": self.kind, self.field_name: [self.value]}

    def as_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class IntegerValue:
    value: int

    kind: ClassVar[int] = 1
    field_name: ClassVar[str] = "intValues"

    def to_wire(self) -> Dict[str, Any]:
        return {"kind": self.kind, self.field_name: [self.value]}

    def as_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FloatValue:
    value: float

    kind: ClassVar[int] = 2
    field_name: ClassVar[str] = "floatValues"

    def to_wire(self) -> Dict[str, Any]:
        return {"kind": self.kind, self.field_name: [self.value]}

    def as_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanValue:
    value: bool

    kind: ClassVar[int] = 3
    field_name: ClassVar[str] = "booleanValues"

    def to_wire(self) -> Dict[str, Any]:
        return {"kind": self.kind, self.field_name: [self.value]}

    def as_text(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class DateTimeValue:
    value: datetime
    text: Optional[str] = field(default=None, compare=False)  # wire form, kept verbatim on decode

    kind: ClassVar[int] = 4
    field_name: ClassVar[str] = "dateTimeValues"

    def to_wire(self) -> Dict[str, Any]:
        return {"kind": self.kind, self.field_name: [self.as_text()]}

    def as_text(self) -> str:
        return self.text if self.text is not None else self.value.isoformat()


WireValue = Union[StringValue, IntegerValue, FloatValue, BooleanValue, DateTimeValue]

WIRE_VALUE_TYPES: Dict[int, Type] = {
    cls.kind: cls
    for cls in (StringValue, IntegerValue, FloatValue, BooleanValue, DateTimeValue)
}


def encode(value: Any) -> WireValue:
    """
    Encode a Python value as a wire value

    Args:
        value: str, int, float, bool, datetime or date

    Returns:
        The matching WireValue variant

    Raises:
        UnsupportedValueTypeError: For None, NaN, infinities and every other type
    """
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return BooleanValue(value)
    if isinstance(value, str):
        return StringValue(value)
    if isinstance(value, int):
        return IntegerValue(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnsupportedValueTypeError(f"Cannot encode non-finite float {value!r}")
        return FloatValue(value)
    if isinstance(value, datetime):
        return DateTimeValue(value)
    if isinstance(value, date):
        return DateTimeValue(datetime.combine(value, time.min))

    raise UnsupportedValueTypeError(
        f"Cannot encode value of type {type(value).__name__}"
    )


def parse_wire_value(data: Any) -> WireValue:
    """
    Build a WireValue from its raw wire form

    Raises:
        MalformedWireValueError: If the kind is unknown, its array is missing or empty,
            or its first element does not have the type of the kind
    """
    if not isinstance(data, dict):
        raise MalformedWireValueError(f"Wire value must be an object, got {type(data).__name__}")

    kind = data.get("kind")
    cls = WIRE_VALUE_TYPES.get(kind) if isinstance(kind, int) and not isinstance(kind, bool) else None
    if cls is None:
        raise MalformedWireValueError(f"Unknown wire value kind: {kind!r}")

    values = data.get(cls.field_name)
    if not isinstance(values, list) or not values:
        raise MalformedWireValueError(
            f"Wire value of kind {kind} has no {cls.field_name}"
        )

    first = values[0]
    if not _element_matches(cls, first):
        raise MalformedWireValueError(
            f"Wire value of kind {kind} holds {type(first).__name__} in {cls.field_name}"
        )

    if cls is DateTimeValue:
        return DateTimeValue(_parse_datetime(first), text=first)
    return cls(first)


def _element_matches(cls: Type, element: Any) -> bool:
    if cls is BooleanValue:
        return isinstance(element, bool)
    # bool is a subclass of int
    if isinstance(element, bool):
        return False
    if cls is IntegerValue:
        return isinstance(element, int)
    if cls is FloatValue:
        return isinstance(element, (int, float))
    return isinstance(element, str)


def _parse_datetime(text: str) -> datetime:
    # fromisoformat only accepts a trailing Z from Python 3.11 on
    candidate = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(candidate)
    except ValueError as e:
        raise MalformedWireValueError(f"Invalid date-time value {text!r}: {e}")


def decode(value: Union[WireValue, Dict[str, Any]]) -> str:
    """
    Decode a wire value to its text form

    Args:
        value: A WireValue variant or its raw dict form

    Returns:
        The first value as text
    """
    if isinstance(value, dict):
        value = parse_wire_value(value)
    return value.as_text()
