"""Character-level scanning of single OBJ lines."""

from __future__ import annotations

import re
import struct
import unicodedata
from dataclasses import dataclass
from enum import Enum, auto

from objmesh.errors import ParseError, Status

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|nan)", re.IGNORECASE)

_ASCII_SPACES = frozenset(" \t\n\v\f\r")
_UNICODE_SPACES = frozenset("\x85\xa0")
_SEPARATOR_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})


def _is_space(char: str) -> bool:
    if char in _ASCII_SPACES:
        return True
    if ord(char) <= 127:
        return False
    return char in _UNICODE_SPACES or unicodedata.category(char) in _SEPARATOR_CATEGORIES


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class LineType(Enum):
    """Kind of statement a line of OBJ text holds."""

    EMPTY = auto()
    COMMENT = auto()
    VERTEX = auto()
    VERTEX_TEXTURE = auto()
    NORMAL = auto()
    FACE = auto()
    GROUP = auto()
    UNKNOWN = auto()


def index_make_absolute(index: int, num_components: int) -> int:
    """Turn a 1-based or negative (relative to the end) OBJ index into a 0-based one."""
    return index - 1 if index >= 0 else num_components + index


@dataclass
class Cursor:
    """A reading position inside one line of text."""

    line: str
    pos: int = 0

    def remainder(self) -> str:
        """The text not yet consumed."""
        return self.line[self.pos:]

    def at_end(self) -> bool:
        return self.pos >= len(self.line)

    def at_end_or_space(self) -> bool:
        return self.at_end() or _is_space(self.line[self.pos])

    def skip_whitespace(self) -> None:
        while not self.at_end() and _is_space(self.line[self.pos]):
            self.pos += 1

    def skip_until_slash_or_space(self) -> None:
        while not self.at_end_or_space() and self.line[self.pos] != "/":
            self.pos += 1

    def skip_until_whitespace(self) -> None:
        while not self.at_end_or_space():
            self.pos += 1

    def _next_is_end_or_space(self) -> bool:
        self.pos += 1
        return self.at_end_or_space()

    def _char(self) -> str:
        return self.line[self.pos]

    def parse_line_type(self) -> LineType:
        """Read the statement keyword and report which kind of line this is."""
        self.skip_whitespace()
        if self.at_end():
            return LineType.EMPTY
        if self._char() == "#":
            return LineType.COMMENT

        if self._char() == "v":
            if self._next_is_end_or_space():
                return LineType.VERTEX
            if self._char() == "t" and self._next_is_end_or_space():
                return LineType.VERTEX_TEXTURE
            if self._char() == "n" and self._next_is_end_or_space():
                return LineType.NORMAL

        if self._char() == "f" and self._next_is_end_or_space():
            return LineType.FACE
        if self._char() == "g" and self._next_is_end_or_space():
            return LineType.GROUP
        return LineType.UNKNOWN

    def _fail(self, status: Status) -> ParseError:
        return ParseError(status, column_number=self.pos)

    def parse_integer(self) -> int:
        """Read a 32-bit integer ending at a slash, whitespace or the line end.

        On failure the cursor is left at the start of the offending token.
        """
        self.skip_whitespace()
        if self.at_end_or_space():
            raise self._fail(Status.ERROR_EXPECTED_FLOAT)

        begin = self.pos
        self.skip_until_slash_or_space()
        content = self.line[begin:self.pos]
        if _INTEGER_RE.fullmatch(content):
            value = int(content)
            if _INT_MIN <= value <= _INT_MAX:
                return value
        self.pos = begin
        raise self._fail(Status.ERROR_EXPECTED_INTEGER)

    def parse_float(self) -> float:
        """Read a single-precision number ending at whitespace or the line end.

        On failure the cursor is left at the start of the offending token.
        """
        self.skip_whitespace()
        if self.at_end_or_space():
            raise self._fail(Status.ERROR_EXPECTED_FLOAT)

        begin = self.pos
        self.skip_until_whitespace()
        content = self.line[begin:self.pos]
        if _FLOAT_RE.fullmatch(content) or _SPECIAL_FLOAT_RE.fullmatch(content):
            try:
                return _to_float32(float(content))
            except OverflowError:
                pass
        self.pos = begin
        raise self._fail(Status.ERROR_EXPECTED_FLOAT)