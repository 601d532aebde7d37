"""
Recursive-descent JSON decoder producing a typed value tree.

Decodes JSON text into JsonValue nodes that keep integers and floats apart,
reject duplicate object keys, and report every failure as a ParseError
subclass carrying position information.
"""

import math
import os
import time
from abc import ABC
from abc import abstractmethod
from collections.abc import Iterator
from collections.abc import Mapping
from contextlib import AbstractContextManager
from contextlib import nullcontext
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from types import MappingProxyType
from typing import IO
from typing import Any
from typing import ClassVar
from typing import TypeAlias

from stojson._cursor import Cursor
from stojson._cursor import is_insignificant

__version__ = "0.1.0"

Position: TypeAlias = int

DIGITS = frozenset("0123456789")
NUMBER_TERMINATORS = frozenset(",}]")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
DEFAULT_MAX_DEPTH = 256

_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
}

# Hot-path profiling, off unless STOJSON_PROFILE is set
PROFILE_HOT_PATHS = __debug__ and "STOJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Call count, time and characters consumed by one parser function."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0

    def record_call(self, duration_ns: int, chars: int) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


_hot_path_stats: dict[str, HotPathStats] = {}


class _CursorProfile:
    """Times one parser call and counts the characters it consumed."""

    __slots__ = ("func_name", "cursor", "start", "start_ns")

    def __init__(self, func_name: str, cursor: Cursor, start: Position) -> None:
        self.func_name = func_name
        self.cursor = cursor
        self.start = start
        self.start_ns = 0

    def __enter__(self) -> None:
        self.start_ns = time.perf_counter_ns()

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        duration = time.perf_counter_ns() - self.start_ns
        stats = _hot_path_stats.get(self.func_name)
        if stats is None:
            stats = _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
        stats.record_call(duration, self.cursor.pos - self.start)


_NO_PROFILE = nullcontext()


def _profile(
    func_name: str, cursor: Cursor, start: Position
) -> AbstractContextManager[None]:
    """Profiles from ``start`` to wherever the cursor ends, when enabled."""
    if PROFILE_HOT_PATHS:
        return _CursorProfile(func_name, cursor, start)
    return _NO_PROFILE


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the profiling statistics, keyed by parser."""
    return dict(_hot_path_stats)


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()


class ErrorKind(Enum):
    """Closed set of failure kinds, one per ParseError subclass."""

    UNEXPECTED_TOKEN = "unexpected_token"
    UNEXPECTED_TOKEN_CH = "unexpected_token_ch"
    UNEXPECTED_TOKEN_ST = "unexpected_token_st"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    INTEGER_WITH_LEADING_ZERO = "integer_with_leading_zero"
    BAD_DECIMAL_POINT_PLACEMENT = "bad_decimal_point_placement"
    OVER_ONE_DECIMAL_POINT = "over_one_decimal_point"
    DECIMAL_POINT_PLACED_AFTER = "decimal_point_placed_after"
    INCONVERTIBLE_TO_FLOAT = "inconvertible_to_float"
    INCONVERTIBLE_TO_INT = "inconvertible_to_int"
    VALUE_NOT_OF_EXPECTED_TYPE = "value_not_of_expected_type"
    DUPLICATE_KEY = "duplicate_key"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ParseError(ValueError):
    """
    Base of all decoding failures, with position and context information.

    Carries the offending document, the offset of the failure and the
    derived line and column numbers. Subclasses add the offending character,
    substring or conversion cause.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")


class UnexpectedToken(ParseError):
    """A token that cannot appear in this context, e.g. ``tru`` for ``true``."""

    kind = ErrorKind.UNEXPECTED_TOKEN

    def __init__(self, doc: str = "", pos: Position = 0) -> None:
        super().__init__("Unexpected token", doc, pos)


class UnexpectedTokenCh(ParseError):
    """An unexpected character, kept in ``char``."""

    kind = ErrorKind.UNEXPECTED_TOKEN_CH

    def __init__(self, char: str, doc: str = "", pos: Position = 0) -> None:
        self.char = char
        super().__init__(f"Unexpected character {char!r}", doc, pos)


class UnexpectedTokenSt(ParseError):
    """An unexpected run of input, kept in ``text``."""

    kind = ErrorKind.UNEXPECTED_TOKEN_ST

    def __init__(self, text: str, doc: str = "", pos: Position = 0) -> None:
        self.text = text
        super().__init__(f"Unexpected input {text!r}", doc, pos)


class UnexpectedEndOfInput(ParseError):
    kind = ErrorKind.UNEXPECTED_END_OF_INPUT

    def __init__(self, doc: str = "", pos: Position = 0) -> None:
        super().__init__("Unexpected end of input", doc, pos)


class IntegerWithLeadingZero(ParseError):
    kind = ErrorKind.INTEGER_WITH_LEADING_ZERO

    def __init__(self, doc: str = "", pos: Position = 0) -> None:
        super().__init__("Leading zeros not allowed", doc, pos)


class BadDecimalPointPlacement(ParseError):
    """A decimal point with no digit after it, e.g. ``1.``."""

    kind = ErrorKind.BAD_DECIMAL_POINT_PLACEMENT

    def __init__(self, doc: str = "", pos: Position = 0) -> None:
        super().__init__("Decimal point must be followed by a digit", doc, pos)


class OverOneDecimalPoint(ParseError):
    kind = ErrorKind.OVER_ONE_DECIMAL_POINT

    def __init__(self, doc: str = "", pos: Position = 0) -> None:
        super().__init__("More than one decimal point", doc, pos)


class DecimalPointPlacedAfter(ParseError):
    """A decimal point following a non-digit such as ``-``."""

    kind = ErrorKind.DECIMAL_POINT_PLACED_AFTER

    def __init__(self, char: str, doc: str = "", pos: Position = 0) -> None:
        self.char = char
        super().__init__(f"Decimal point placed after {char!r}", doc, pos)


class InconvertibleToFloat(ParseError):
    kind = ErrorKind.INCONVERTIBLE_TO_FLOAT

    def __init__(
        self, text: str, cause: Exception, doc: str = "", pos: Position = 0
    ) -> None:
        self.text = text
        self.cause = cause
        super().__init__(f"Cannot convert {text!r} to float: {cause}", doc, pos)


class InconvertibleToInt(ParseError):
    kind = ErrorKind.INCONVERTIBLE_TO_INT

    def __init__(
        self, text: str, cause: Exception, doc: str = "", pos: Position = 0
    ) -> None:
        self.text = text
        self.cause = cause
        super().__init__(
            f"Cannot convert {text!r} to 64-bit integer: {cause}", doc, pos
        )


class ValueNotOfExpectedType(ParseError):
    """Raised by ``JsonValue.expect`` when a node has another kind."""

    kind = ErrorKind.VALUE_NOT_OF_EXPECTED_TYPE

    def __init__(self, value: "JsonValue", expected_type_name: str) -> None:
        self.value = value
        self.expected_type_name = expected_type_name
        super().__init__(
            f"Expected {expected_type_name} value, got {value.kind.value}"
        )


class DuplicateKey(ParseError):
    kind = ErrorKind.DUPLICATE_KEY

    def __init__(self, key: str, doc: str = "", pos: Position = 0) -> None:
        self.key = key
        super().__init__(f"Duplicate object key {key!r}", doc, pos)


class NestingTooDeep(ParseError):
    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, limit: int, doc: str = "", pos: Position = 0) -> None:
        self.limit = limit
        super().__init__(f"Nesting deeper than {limit} levels", doc, pos)


class ValueKind(Enum):
    """The seven JSON value variants."""

    ARRAY = "array"
    OBJECT = "object"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"


class JsonValue(ABC):
    """
    Tagged union of decoded JSON values.

    Each variant is a frozen dataclass below. Consumers either ``match`` on
    the variant classes or narrow with the ``as_*`` accessors, which return
    None when the node is of another kind.
    """

    __slots__ = ()

    kind: ClassVar[ValueKind]

    @property
    @abstractmethod
    def payload(self) -> Any:
        """The Python value the node wraps."""

    def _narrow(self, kind: ValueKind) -> Any:
        return self.payload if self.kind is kind else None

    def as_array(self) -> tuple["JsonValue", ...] | None:
        return self._narrow(ValueKind.ARRAY)

    def as_object(self) -> Mapping[str, "JsonValue"] | None:
        return self._narrow(ValueKind.OBJECT)

    def as_string(self) -> str | None:
        return self._narrow(ValueKind.STRING)

    def as_integer(self) -> int | None:
        return self._narrow(ValueKind.INTEGER)

    def as_float(self) -> float | None:
        return self._narrow(ValueKind.FLOAT)

    def as_boolean(self) -> bool | None:
        return self._narrow(ValueKind.BOOLEAN)

    def as_null(self) -> "JsonNull | None":
        """Returns the node itself for null, since None signals a mismatch."""
        return self if isinstance(self, JsonNull) else None

    def is_array(self) -> bool:
        return self.kind is ValueKind.ARRAY

    def is_object(self) -> bool:
        return self.kind is ValueKind.OBJECT

    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING

    def is_integer(self) -> bool:
        return self.kind is ValueKind.INTEGER

    def is_float(self) -> bool:
        return self.kind is ValueKind.FLOAT

    def is_boolean(self) -> bool:
        return self.kind is ValueKind.BOOLEAN

    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def is_number(self) -> bool:
        return self.is_integer() or self.is_float()

    def is_primitive(self) -> bool:
        return not self.is_container()

    def is_container(self) -> bool:
        return self.is_array() or self.is_object()

    def expect(self, kind: ValueKind) -> Any:
        """
        Returns the payload of a node known to be of ``kind``.

        Raises ValueNotOfExpectedType when the node holds another variant.
        """
        if self.kind is not kind:
            raise ValueNotOfExpectedType(self, kind.value)
        return self.payload

    def to_python(self) -> Any:
        """Converts the tree into plain dict/list/str/int/float/bool/None."""
        return self.payload


@dataclass(frozen=True, slots=True)
class JsonArray(JsonValue):
    items: tuple[JsonValue, ...] = ()

    kind: ClassVar[ValueKind] = ValueKind.ARRAY

    @property
    def payload(self) -> tuple[JsonValue, ...]:
        return self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(self.items)

    def __getitem__(self, index: int) -> JsonValue:
        return self.items[index]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True, slots=True)
class JsonObject(JsonValue):
    """
    Object members in source order.

    ``members`` is a read-only view over a private copy of the mapping the
    node was built from. Like a dict, an object node is unhashable.
    """

    members: Mapping[str, JsonValue] = field(default_factory=dict)

    kind: ClassVar[ValueKind] = ValueKind.OBJECT

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", MappingProxyType(dict(self.members)))

    @property
    def payload(self) -> Mapping[str, JsonValue]:
        return self.members

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __contains__(self, key: object) -> bool:
        return key in self.members

    def __getitem__(self, key: str) -> JsonValue:
        return self.members[key]

    def get(self, key: str, default: JsonValue | None = None) -> JsonValue | None:
        return self.members.get(key, default)

    def to_python(self) -> dict[str, Any]:
        return {key: value.to_python() for key, value in self.members.items()}


@dataclass(frozen=True, slots=True)
class JsonString(JsonValue):
    value: str

    kind: ClassVar[ValueKind] = ValueKind.STRING

    @property
    def payload(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonInteger(JsonValue):
    value: int

    kind: ClassVar[ValueKind] = ValueKind.INTEGER

    @property
    def payload(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonFloat(JsonValue):
    value: float

    kind: ClassVar[ValueKind] = ValueKind.FLOAT

    @property
    def payload(self) -> float:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonBoolean(JsonValue):
    value: bool

    kind: ClassVar[ValueKind] = ValueKind.BOOLEAN

    @property
    def payload(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class JsonNull(JsonValue):
    kind: ClassVar[ValueKind] = ValueKind.NULL

    @property
    def payload(self) -> None:
        return None


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    max_depth bounds container nesting; allow_leading_zeros accepts
    literals such as ``0123`` that strict JSON rejects.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    allow_leading_zeros: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        if not isinstance(self.allow_leading_zeros, bool):
            raise TypeError("allow_leading_zeros must be a boolean")


DEFAULT_CONFIG = ParseConfig()


class ObjectState(Enum):
    """States of the object member state machine."""

    AWAITING_KEY = "awaiting_key"
    AWAITING_COLON = "awaiting_colon"
    AWAITING_VALUE = "awaiting_value"
    AWAITING_COMMA_OR_END = "awaiting_comma_or_end"


def _head_pos(cursor: Cursor) -> Position:
    """Offset of the head character a literal parser was handed."""
    return max(cursor.pos - 1, 0)


def parse_value(
    cursor: Cursor, config: ParseConfig = DEFAULT_CONFIG, depth: int = 0
) -> JsonValue:
    """
    Parses one JSON value starting at the next significant character.

    ``depth`` is the number of containers already open around this value.
    Container parsers call back into this function for every element and
    member value.
    """
    cursor.skip_insignificant()
    start = cursor.pos
    char = cursor.advance()

    if char is None:
        raise UnexpectedEndOfInput(cursor.text, start)

    if char in "tf":
        return parse_boolean(char, cursor)
    elif char == "n":
        return parse_null(char, cursor)
    elif char == '"':
        return parse_string(char, cursor)
    elif char in DIGITS or char == "-":
        return parse_number(char, cursor, config)
    elif char in "{[":
        if depth + 1 > config.max_depth:
            raise NestingTooDeep(config.max_depth, cursor.text, start)
        if char == "{":
            return parse_object(char, cursor, config, depth + 1)
        return parse_array(char, cursor, config, depth + 1)
    else:
        raise UnexpectedTokenCh(char, cursor.text, start)


def _read_string(head: str, cursor: Cursor) -> str:
    """Consumes string content after the opening quote, resolving escapes."""
    start = _head_pos(cursor)
    if head != '"':
        raise UnexpectedTokenCh(head, cursor.text, start)

    chunks: list[str] = []
    while True:
        char = cursor.advance()
        if char is None:
            break
        if char == '"':
            return "".join(chunks)
        if char == "\\":
            escaped = cursor.advance()
            if escaped is None:
                break
            chunks.append(_ESCAPES.get(escaped, escaped))
        else:
            chunks.append(char)

    raise UnexpectedEndOfInput(cursor.text, cursor.pos)


def parse_string(head: str, cursor: Cursor) -> JsonString:
    """Parses a string whose opening quote ``head`` was already consumed."""
    with _profile("parse_string", cursor, _head_pos(cursor)):
        return JsonString(_read_string(head, cursor))


def _is_bare_zero(buffer: list[str]) -> bool:
    return buffer == ["0"] or buffer == ["-", "0"]


def parse_number(
    head: str, cursor: Cursor, config: ParseConfig = DEFAULT_CONFIG
) -> JsonInteger | JsonFloat:
    """
    Parses a number literal whose first character ``head`` was consumed.

    The literal ends before ``,``, ``}``, ``]``, whitespace or the end of
    input; the terminator itself is left on the cursor. A literal with a
    decimal point becomes a JsonFloat, anything else a JsonInteger.
    """
    start = _head_pos(cursor)
    with _profile("parse_number", cursor, start):
        if head not in DIGITS and head != "-":
            raise UnexpectedTokenCh(head, cursor.text, start)

        buffer = [head]
        previous = head
        floating_point = False

        while True:
            char = cursor.peek()
            if (
                char is None
                or char in NUMBER_TERMINATORS
                or is_insignificant(char)
            ):
                break

            pos = cursor.pos
            cursor.advance()

            # Order matters: "." is a non-digit but handled before the
            # catch-all rejection below.
            if char == ".":
                if floating_point:
                    raise OverOneDecimalPoint(cursor.text, pos)
                if previous not in DIGITS:
                    raise DecimalPointPlacedAfter(previous, cursor.text, pos)
                floating_point = True
            elif char in DIGITS:
                if (
                    not floating_point
                    and not config.allow_leading_zeros
                    and _is_bare_zero(buffer)
                ):
                    raise IntegerWithLeadingZero(cursor.text, start)
            else:
                raise UnexpectedTokenCh(char, cursor.text, pos)

            buffer.append(char)
            previous = char

        literal = "".join(buffer)

        if floating_point:
            if previous == ".":
                raise BadDecimalPointPlacement(cursor.text, cursor.pos - 1)
            try:
                number = float(literal)
            except ValueError as e:
                raise InconvertibleToFloat(
                    literal, e, cursor.text, start
                ) from e
            if math.isinf(number):
                raise InconvertibleToFloat(
                    literal,
                    OverflowError("float literal out of range"),
                    cursor.text,
                    start,
                )
            return JsonFloat(number)

        try:
            integer = int(literal)
        except ValueError as e:
            raise InconvertibleToInt(literal, e, cursor.text, start) from e
        if not INT64_MIN <= integer <= INT64_MAX:
            raise InconvertibleToInt(
                literal,
                OverflowError("integer literal out of 64-bit range"),
                cursor.text,
                start,
            )
        return JsonInteger(integer)


def parse_boolean(head: str, cursor: Cursor) -> JsonBoolean:
    """Parses ``true``/``false``; the leading ``t``/``f`` was consumed."""
    start = _head_pos(cursor)
    if head == "t" and cursor.take(3) == "rue":
        return JsonBoolean(True)
    if head == "f" and cursor.take(4) == "alse":
        return JsonBoolean(False)
    raise UnexpectedToken(cursor.text, start)


def parse_null(head: str, cursor: Cursor) -> JsonNull:
    start = _head_pos(cursor)
    if head == "n" and cursor.take(3) == "ull":
        return JsonNull()
    raise UnexpectedToken(cursor.text, start)


def parse_array(
    head: str,
    cursor: Cursor,
    config: ParseConfig = DEFAULT_CONFIG,
    depth: int = 1,
) -> JsonArray:
    """
    Parses array elements up to the closing bracket.

    Commas must separate elements: ``[1,,2]``, ``[,1]`` and ``[1,]`` are
    rejected, as is a missing comma.
    """
    start = _head_pos(cursor)
    with _profile("parse_array", cursor, start):
        if head != "[":
            raise UnexpectedTokenCh(head, cursor.text, start)

        items: list[JsonValue] = []
        expecting_value = True

        while True:
            cursor.skip_insignificant()
            pos = cursor.pos
            char = cursor.peek()

            if char is None:
                raise UnexpectedEndOfInput(cursor.text, pos)

            if char == "]":
                # A value is still expected after a comma
                if expecting_value and items:
                    raise UnexpectedTokenCh(char, cursor.text, pos)
                cursor.advance()
                return JsonArray(tuple(items))

            if expecting_value:
                if char == ",":
                    raise UnexpectedTokenCh(char, cursor.text, pos)
                items.append(parse_value(cursor, config, depth))
                expecting_value = False
            elif char == ",":
                cursor.advance()
                expecting_value = True
            else:
                raise UnexpectedTokenCh(char, cursor.text, pos)


def parse_object(
    head: str,
    cursor: Cursor,
    config: ParseConfig = DEFAULT_CONFIG,
    depth: int = 1,
) -> JsonObject:
    """Parses object members with the ObjectState machine."""
    start = _head_pos(cursor)
    with _profile("parse_object", cursor, start):
        if head != "{":
            raise UnexpectedTokenCh(head, cursor.text, start)

        members: dict[str, JsonValue] = {}
        state = ObjectState.AWAITING_KEY
        key = ""

        while True:
            cursor.skip_insignificant()
            pos = cursor.pos

            if cursor.peek() is None:
                raise UnexpectedEndOfInput(cursor.text, pos)

            if state is ObjectState.AWAITING_VALUE:
                members[key] = parse_value(cursor, config, depth)
                state = ObjectState.AWAITING_COMMA_OR_END
                continue

            char = cursor.advance()

            if state is ObjectState.AWAITING_KEY:
                if char == '"':
                    key = _read_string(char, cursor)
                    if key in members:
                        raise DuplicateKey(key, cursor.text, pos)
                    state = ObjectState.AWAITING_COLON
                    continue
                if char == "}" and not members:
                    return JsonObject(members)
            elif state is ObjectState.AWAITING_COLON:
                if char == ":":
                    state = ObjectState.AWAITING_VALUE
                    continue
            elif char == ",":
                state = ObjectState.AWAITING_KEY
                continue
            elif char == "}":
                return JsonObject(members)

            raise UnexpectedTokenCh(char, cursor.text, pos)


def _parse_document(text: str, config: ParseConfig) -> JsonValue:
    """Parses exactly one value, rejecting anything but whitespace after it."""
    cursor = Cursor(text)
    with _profile("parse_document", cursor, 0):
        try:
            value = parse_value(cursor, config)
        except RecursionError as e:
            raise NestingTooDeep(config.max_depth, text, cursor.pos) from e

        cursor.skip_insignificant()
        trailing = cursor.peek()
        if trailing is not None:
            raise UnexpectedTokenCh(trailing, text, cursor.pos)

        return value


def parse(text: str, **kwargs: Any) -> JsonValue:
    """
    Parses a JSON document into a JsonValue tree.

    Keyword arguments build a ParseConfig. Every malformed input raises a
    ParseError subclass; nothing is coerced to null.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON document must be str, not {type(text).__name__}"
        )

    config = ParseConfig(**kwargs)
    return _parse_document(text, config)


def parse_bytes(data: bytes | bytearray, **kwargs: Any) -> JsonValue:
    """
    Decodes UTF-8 bytes and parses them.

    Undecodable input raises UnexpectedTokenSt holding the offending bytes
    in backslash-escaped form, positioned at their byte offset.
    """
    if not isinstance(data, bytes | bytearray):
        raise TypeError(
            f"the JSON document must be bytes, not {type(data).__name__}"
        )

    try:
        text = bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        bad = e.object[e.start : e.end].decode("utf-8", "backslashreplace")
        raise UnexpectedTokenSt(bad, "", e.start) from e

    return parse(text, **kwargs)


def load(fp: IO[str], **kwargs: Any) -> JsonValue:
    """
    Parses a JSON document from a text file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


def try_parse(text: str, **kwargs: Any) -> JsonValue | ParseError:
    """
    Parses like ``parse`` but returns the ParseError instead of raising it.

    Lets callers branch on the failure kind without a try block.
    """
    try:
        return parse(text, **kwargs)
    except ParseError as e:
        return e


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "BadDecimalPointPlacement",
    "Cursor",
    "DecimalPointPlacedAfter",
    "DuplicateKey",
    "ErrorKind",
    "HotPathStats",
    "InconvertibleToFloat",
    "InconvertibleToInt",
    "IntegerWithLeadingZero",
    "JsonArray",
    "JsonBoolean",
    "JsonFloat",
    "JsonInteger",
    "JsonNull",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "NestingTooDeep",
    "ObjectState",
    "OverOneDecimalPoint",
    "ParseConfig",
    "ParseError",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "UnexpectedTokenCh",
    "UnexpectedTokenSt",
    "ValueKind",
    "ValueNotOfExpectedType",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "parse",
    "parse_array",
    "parse_boolean",
    "parse_bytes",
    "parse_null",
    "parse_number",
    "parse_object",
    "parse_string",
    "parse_value",
    "try_parse",
]
