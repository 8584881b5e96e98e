from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from opentrackio_parse.decode.helpers import VERSION_PATTERN, assign_field, assign_regex_field, find_section, require_object


@dataclass
class Protocol:
    name: str
    version: str


def parse_protocol(document: Any, errors: list[str]) -> Protocol | None:
    found, node = find_section(document, "protocol")
    if not found:
        return None
    if not require_object(node, "protocol", errors):
        return None

    if "name" not in node or "version" not in node:
        errors.append("field: protocol is missing required fields")
        return None

    name = assign_field(node, "name", "string", errors, "protocol")
    version = assign_regex_field(node, "version", VERSION_PATTERN, errors, "protocol")
    # An unusable version invalidates the whole entity, name included.
    if name is None or version is None:
        return None
    return Protocol(name=name, version=version)
