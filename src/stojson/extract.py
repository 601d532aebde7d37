"""
Single-field extraction from raw JSON bytes.

Finds ``"<key>":"`` in a whitespace-stripped copy of the document and
returns the string that follows, without building a value tree. This is the
cheap path for reading one known field; ``stojson.parse`` is the general
fallback.
"""

import logging

logger = logging.getLogger(__name__)

_QUOTE = ord('"')
_BACKSLASH = ord("\\")
_OPENERS = {ord("{"), ord("[")}
_CLOSERS = {ord("}"): ord("{"), ord("]"): ord("[")}
_ASCII_WHITESPACE = frozenset(b" \t\n\x0c\r")


class ExtractError(ValueError):
    """Base of key extraction failures."""


class InvalidJson(ExtractError):
    """The buffer has unbalanced brackets, braces or quotes."""


class PatternNotFound(ExtractError):
    """The ``"<key>":"`` pattern does not occur in the buffer."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"pattern '\"{key}\":\"' not found")


def sanitize_json(data: bytes) -> bytes | None:
    """
    Strips ASCII whitespace outside strings and checks nesting parity.

    Escaped characters inside strings are skipped, so escaped quotes do not
    toggle string state. Returns None when brackets, braces or quotes are
    unbalanced.
    """
    stack: list[int] = []
    escaping = False
    quoting = False
    stripped = bytearray()

    for byte in data:
        if escaping:
            escaping = False
        elif quoting and byte == _BACKSLASH:
            escaping = True
        elif byte == _QUOTE:
            quoting = not quoting
        elif quoting:
            pass
        elif byte in _OPENERS:
            stack.append(byte)
        elif byte in _CLOSERS:
            if not stack or stack.pop() != _CLOSERS[byte]:
                return None

        if quoting or byte not in _ASCII_WHITESPACE:
            stripped.append(byte)

    if stack or quoting or escaping:
        return None
    return bytes(stripped)


def find_pattern(needle: bytes, haystack: bytes) -> tuple[int, int] | None:
    """Returns inclusive (start, end) offsets of the first ``needle`` match."""
    if not needle:
        raise ValueError("needle must not be empty")

    start = haystack.find(needle)
    if start < 0:
        return None
    return start, start + len(needle) - 1


def extract_json_str(data: bytes, key: str) -> str:
    """
    Returns the raw string value of the first ``key`` member in ``data``.

    The value is read up to the next unescaped quote; escape sequences are
    returned as they appear in the source.

    Raises:
        InvalidJson: If the buffer is unbalanced or the value unterminated
        PatternNotFound: If no string member named ``key`` exists
    """
    sanitized = sanitize_json(data)
    if sanitized is None:
        raise InvalidJson("unbalanced brackets, braces or quotes")

    found = find_pattern(f'"{key}":"'.encode(), sanitized)
    if found is None:
        raise PatternNotFound(key)

    _, end = found
    value = bytearray()
    escaping = False
    for byte in sanitized[end + 1 :]:
        if escaping:
            escaping = False
        elif byte == _BACKSLASH:
            escaping = True
        elif byte == _QUOTE:
            logger.debug("extracted %r at offset %d", key, end + 1)
            return value.decode("utf-8", errors="replace")
        value.append(byte)

    raise InvalidJson(f"unterminated string value for {key!r}")
