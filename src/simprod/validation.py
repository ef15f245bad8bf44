"""
JSON Validation
===============

Shape checks shared by every ``from_json`` constructor.

Inputs are JSON values as produced by ``json.load``: dict, list, str,
int, float, bool or None. JSON booleans are never accepted where an
integer or a number is expected.

Each helper returns nothing on success and raises a
SimprodValidationError subclass on failure.
"""

from typing import Any

from .errors import (
    IdentifierMismatchError,
    MissingKeyError,
    ShapeError,
    SizeMismatchError,
)


def _label(name: str) -> str:
    return f"JSON value {name!r}" if name else "JSON value"


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


# Relations
# ---------

def ensure_zone_identifiers_are_the_same(id1: str, id2: str) -> None:
    """Ensure that an embedded zone identifier matches the resolved zone."""
    if id1 != id2:
        raise IdentifierMismatchError(f"Different zone identifiers: {id1} and {id2}")


def ensure_identifier_length(identifier: str, max_length: int) -> None:
    if len(identifier) > max_length:
        raise ShapeError(
            f"Identifier {identifier!r} is longer than {max_length} characters"
        )


# Value content
# -------------

def ensure_json_is_string(j: Any, name: str = "") -> None:
    if not isinstance(j, str):
        raise ShapeError(f"{_label(name)} is not a string")


def ensure_json_is_object(j: Any, name: str = "") -> None:
    if not isinstance(j, dict):
        raise ShapeError(f"{_label(name)} is not an object")


def ensure_json_is_array(j: Any, name: str = "") -> None:
    if not isinstance(j, list):
        raise ShapeError(f"{_label(name)} is not an array")


def ensure_json_is_array_of_integers(j: Any, name: str = "") -> None:
    ensure_json_is_array(j, name)
    for i, value in enumerate(j):
        if not _is_integer(value):
            raise ShapeError(f"The value at index {i} of {_label(name)} is not an integer")


def ensure_json_is_array_of_numbers(j: Any, name: str = "") -> None:
    ensure_json_is_array(j, name)
    for i, value in enumerate(j):
        if not _is_number(value):
            raise ShapeError(f"The value at index {i} of {_label(name)} is not a number")


# Object content
# --------------

def ensure_json_object_has_size(j: Any, size: int, name: str = "") -> None:
    ensure_json_is_object(j, name)
    if len(j) != size:
        raise ShapeError(
            f"Size of {_label(name)} is not {size} (keys: {', '.join(sorted(j))})"
        )


def ensure_json_object_contains_key(j: Any, key: str, name: str = "") -> None:
    ensure_json_is_object(j, name)
    if key not in j:
        raise MissingKeyError(f"{_label(name)} does not contain the key {key!r}")


# Array content
# -------------

def ensure_json_array_has_size(j: Any, size: int, name: str = "") -> None:
    ensure_json_is_array(j, name)
    if len(j) != size:
        raise SizeMismatchError(
            f"Size of {_label(name)} is {len(j)}, expected {size}"
        )
