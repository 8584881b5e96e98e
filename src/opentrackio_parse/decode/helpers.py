from __future__ import annotations

import re
from typing import Any, Callable


UUID_PATTERN = re.compile(r"urn:uuid:[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}")
VERSION_PATTERN = re.compile(r"[0-9]+\.[0-9]+\.[0-9]+")
MAC_ADDRESS_PATTERN = re.compile(r"([A-F0-9]{2}:){5}[A-F0-9]{2}")


def _is_number(value: Any) -> bool:
    # JSON booleans arrive as bool, which Python also treats as int.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _int_between(low: int, high: int) -> Callable[[Any], bool]:
    def check(value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and low <= value <= high

    return check


_KIND_CHECKS: dict[str, Callable[[Any], bool]] = {
    "string": lambda value: isinstance(value, str),
    "boolean": lambda value: isinstance(value, bool),
    "double": _is_number,
    "integer": _int_between(-(2**63), 2**63 - 1),
    "int64": _int_between(-(2**63), 2**63 - 1),
    "int32": _int_between(-(2**31), 2**31 - 1),
    "uint16": _int_between(0, 2**16 - 1),
    "uint32": _int_between(0, 2**32 - 1),
    "uint48": _int_between(0, 2**48 - 1),
}


def is_kind(value: Any, kind: str) -> bool:
    check = _KIND_CHECKS.get(kind)
    if check is None:
        raise ValueError(f"unknown JSON kind: {kind}")
    return check(value)


def _coerce(value: Any, kind: str) -> Any:
    if kind == "double":
        return float(value)
    return value


def field_path(name: str, parent: str | None) -> str:
    return f"{parent}/{name}" if parent else name


def find_section(document: Any, *keys: str) -> tuple[bool, Any]:
    """Walk nested objects; returns (found, value).

    A JSON ``null`` is a present value, so presence is reported separately.
    """

    node = document
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return False, None
        node = node[key]
    return True, node


def require_object(value: Any, path: str, errors: list[str]) -> bool:
    if isinstance(value, dict):
        return True
    errors.append(f"field: {path} isn't of type: object")
    return False


def populate_sequence(items: list[Any], kind: str) -> tuple[bool, list[Any]]:
    """Coerce every element to ``kind``; stops at the first incompatible one."""

    values: list[Any] = []
    for item in items:
        if not is_kind(item, kind):
            return False, []
        values.append(_coerce(item, kind))
    return True, values


def assign_field(
    node: Any,
    name: str,
    kind: str,
    errors: list[str],
    parent: str | None = None,
) -> Any:
    """Return ``node[name]`` when it is of ``kind``.

    Absent fields give ``None`` silently; present fields of the wrong kind give
    ``None`` and one error. Kinds ending in ``[]`` are homogeneous arrays and
    are all-or-nothing.
    """

    if not isinstance(node, dict) or name not in node:
        return None

    value = node[name]
    path = field_path(name, parent)

    if kind.endswith("[]"):
        element_kind = kind[:-2]
        if not isinstance(value, list):
            errors.append(f"field: {path} isn't of type: array")
            return None
        ok, values = populate_sequence(value, element_kind)
        if not ok:
            errors.append(f"field: {path} value isn't of type: {element_kind}")
            return None
        return values

    if not is_kind(value, kind):
        errors.append(f"field: {path} isn't of type: {kind}")
        return None
    return _coerce(value, kind)


def assign_regex_field(
    node: Any,
    name: str,
    pattern: re.Pattern[str],
    errors: list[str],
    parent: str | None = None,
) -> str | None:
    value = assign_field(node, name, "string", errors, parent)
    if value is None:
        return None
    if pattern.fullmatch(value) is None:
        errors.append(f"field: {field_path(name, parent)} doesn't match required pattern")
        return None
    return value


def check_range(value: int | None, low: int, high: int, path: str, errors: list[str]) -> int | None:
    if value is None:
        return None
    if value < low or value > high:
        errors.append(f"field: {path} is outside the expected range {low} - {high}")
        return None
    return value
