from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from opentrackio_parse.decode.helpers import assign_field, find_section, require_object


@dataclass
class Duration:
    num: int
    denom: int


def parse_duration(document: Any, errors: list[str]) -> Duration | None:
    found, node = find_section(document, "static", "duration")
    if not found:
        return None
    if not require_object(node, "duration", errors):
        return None

    num = assign_field(node, "num", "uint32", errors, "duration")
    denom = assign_field(node, "denom", "uint32", errors, "duration")
    if num is None or denom is None:
        errors.append("field: duration is missing required fields")
        return None
    return Duration(num=num, denom=denom)
