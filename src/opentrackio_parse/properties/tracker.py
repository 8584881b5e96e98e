from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from opentrackio_parse.decode.helpers import assign_field, find_section, require_object


@dataclass
class Tracker:
    firmware_version: str | None = None
    make: str | None = None
    model: str | None = None
    serial_number: str | None = None
    notes: str | None = None
    recording: bool | None = None
    slate: str | None = None
    status: str | None = None


def parse_tracker(document: Any, errors: list[str]) -> Tracker | None:
    has_static, static_node = find_section(document, "static", "tracker")
    has_standard, standard_node = find_section(document, "tracker")
    if not has_static and not has_standard:
        return None

    tkr = Tracker()
    parsed_any = False
    if has_static and require_object(static_node, "static/tracker", errors):
        tkr.firmware_version = assign_field(static_node, "firmwareVersion", "string", errors, "static/tracker")
        tkr.make = assign_field(static_node, "make", "string", errors, "static/tracker")
        tkr.model = assign_field(static_node, "model", "string", errors, "static/tracker")
        tkr.serial_number = assign_field(static_node, "serialNumber", "string", errors, "static/tracker")
        parsed_any = True

    if has_standard and require_object(standard_node, "tracker", errors):
        tkr.notes = assign_field(standard_node, "notes", "string", errors, "tracker")
        tkr.recording = assign_field(standard_node, "recording", "boolean", errors, "tracker")
        tkr.slate = assign_field(standard_node, "slate", "string", errors, "tracker")
        tkr.status = assign_field(standard_node, "status", "string", errors, "tracker")
        parsed_any = True

    return tkr if parsed_any else None
