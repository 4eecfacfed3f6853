"""Parser status codes and the exception raised for parse failures."""

from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Parser status; ranges are delimited by the ``*_BEGIN``/``*_END`` markers."""

    VERBOSE = 0
    DEBUG_BEGIN = 1
    OK = 2
    DEBUG_END = 3

    ERROR = 4
    ERROR_BEGIN = 5
    ERROR_STATE_BROKEN = 6
    ERROR_EXPECTED_FLOAT = 7
    ERROR_EXPECTED_INTEGER = 8
    ERROR_EXPECTED_STRING = 9
    ERROR_COMPONENTS_INCOHERENCE = 10
    ERROR_UNDEFINED_INDEX = 11
    ERROR_INPUT = 12
    ERROR_INPUT_EMPTY = 13
    ERROR_END = 14

    RESERVED = 15


_DESCRIPTIONS = {
    Status.OK: "OK",
    Status.ERROR_STATE_BROKEN: "State broken",
    Status.ERROR_EXPECTED_FLOAT: "Float expected",
    Status.ERROR_EXPECTED_INTEGER: "Integer expected",
    Status.ERROR_COMPONENTS_INCOHERENCE: "Face components assymetry",
    Status.ERROR_UNDEFINED_INDEX: "Undefined index",
    Status.ERROR_INPUT: "Error opening file",
    Status.ERROR_INPUT_EMPTY: "File is empty",
    Status.ERROR_EXPECTED_STRING: "String expected",
}


def status_to_string(status: Status) -> str:
    """Human-readable description of a status."""
    return _DESCRIPTIONS.get(status, "Reserved state")


def status_type(status: Status) -> Status:
    """Classify a status as ``VERBOSE``, ``ERROR`` or ``RESERVED``."""
    if Status.DEBUG_BEGIN < status < Status.DEBUG_END:
        return Status.VERBOSE
    if Status.ERROR_BEGIN < status < Status.ERROR_END:
        return Status.ERROR
    return Status.RESERVED


class ParseError(ValueError):
    """Raised when OBJ input cannot be parsed."""

    def __init__(self, status: Status, line_number: int = 0, column_number: int = 0) -> None:
        self.status = status
        self.line_number = line_number
        self.column_number = column_number
        super().__init__(
            f"{status_to_string(status)} (line {line_number}, column {column_number})"
        )