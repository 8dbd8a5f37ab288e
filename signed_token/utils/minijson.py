"""Minimal JSON codec for flat token headers and payloads.

Only what a compact token needs is supported: one object whose values are
strings, numbers, booleans or null. Output keeps insertion order so that the
same fields always serialize to the same bytes.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping

Scalar = str | int | float | bool | None

_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")
_HEX_RE = re.compile(r"[0-9A-Fa-f]{4}")
_WHITESPACE = " \t\n\r"
_LITERALS: Dict[str, Scalar] = {"true": True, "false": False, "null": None}
_UNESCAPES = {'"': '"', "\\": "\\", "/": "/", "b": "\b", "f": "\f", "n": "\n", "r": "\r", "t": "\t"}
_ESCAPES = {'"': '\\"', "\\": "\\\\", "\b": "\\b", "\f": "\\f", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _quote(value: str) -> str:
    out = ['"']
    for char in value:
        if char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif char < " ":
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    out.append('"')
    return "".join(out)


def dump_object(fields: Mapping[str, str | int]) -> str:
    """Serialize a flat mapping of string/integer values to compact JSON."""
    parts = []
    for key, value in fields.items():
        if isinstance(value, str):
            encoded = _quote(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            encoded = str(value)
        else:
            raise TypeError(f"Unsupported value for field '{key}': {type(value).__name__}")
        parts.append(f"{_quote(key)}:{encoded}")
    return "{" + ",".join(parts) + "}"


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expect(self, char: str) -> None:
        if self.peek() != char:
            raise ValueError(f"expected '{char}' at offset {self.pos}")
        self.pos += 1

    def read_hex4(self) -> int:
        chunk = self.text[self.pos:self.pos + 4]
        if _HEX_RE.fullmatch(chunk) is None:
            raise ValueError(f"invalid unicode escape at offset {self.pos}")
        self.pos += 4
        return int(chunk, 16)

    def read_string(self) -> str:
        self.expect('"')
        out = []
        while True:
            char = self.peek()
            if not char:
                raise ValueError("unterminated string")
            self.pos += 1
            if char == '"':
                return "".join(out)
            if char < " ":
                raise ValueError(f"control character in string at offset {self.pos - 1}")
            if char != "\\":
                out.append(char)
                continue
            escape = self.peek()
            self.pos += 1
            if escape in _UNESCAPES:
                out.append(_UNESCAPES[escape])
            elif escape == "u":
                out.append(self.read_code_point())
            else:
                raise ValueError(f"invalid escape at offset {self.pos - 1}")

    def read_code_point(self) -> str:
        code = self.read_hex4()
        if 0xDC00 <= code <= 0xDFFF:
            raise ValueError("unpaired low surrogate")
        if 0xD800 <= code <= 0xDBFF:
            if self.text[self.pos:self.pos + 2] != "\\u":
                raise ValueError("unpaired high surrogate")
            self.pos += 2
            low = self.read_hex4()
            if not 0xDC00 <= low <= 0xDFFF:
                raise ValueError("unpaired high surrogate")
            code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
        return chr(code)

    def read_value(self) -> Scalar:
        char = self.peek()
        if char == '"':
            return self.read_string()
        if char in ("{", "["):
            raise ValueError("nested values are not supported")
        for literal, value in _LITERALS.items():
            if self.text.startswith(literal, self.pos):
                self.pos += len(literal)
                return value
        match = _NUMBER_RE.match(self.text, self.pos)
        if match is None:
            raise ValueError(f"unexpected value at offset {self.pos}")
        self.pos = match.end()
        if match.group(1) or match.group(2):
            return float(match.group(0))
        return int(match.group(0))


def load_object(text: str) -> Dict[str, Scalar]:
    """Parse a single flat JSON object.

    Raises ``ValueError`` on any syntax error, nested container, duplicate key
    or trailing data.
    """
    reader = _Reader(text)
    reader.skip_whitespace()
    reader.expect("{")
    result: Dict[str, Scalar] = {}
    reader.skip_whitespace()
    if reader.peek() == "}":
        reader.pos += 1
    else:
        while True:
            reader.skip_whitespace()
            key = reader.read_string()
            if key in result:
                raise ValueError(f"duplicate key '{key}'")
            reader.skip_whitespace()
            reader.expect(":")
            reader.skip_whitespace()
            result[key] = reader.read_value()
            reader.skip_whitespace()
            if reader.peek() == ",":
                reader.pos += 1
                continue
            reader.expect("}")
            break
    reader.skip_whitespace()
    if reader.pos != len(text):
        raise ValueError(f"trailing data at offset {reader.pos}")
    return result
