from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from opentrackio_parse.decode.helpers import find_section, is_kind, require_object


_FIELDS = ("E", "N", "U", "lat0", "lon0", "h0")


@dataclass
class GlobalStage:
    """ENU offset of the stage origin from a geodetic reference point."""

    e: float
    n: float
    u: float
    lat0: float
    lon0: float
    h0: float


def parse_global_stage(document: Any, errors: list[str]) -> GlobalStage | None:
    found, node = find_section(document, "globalStage")
    if not found:
        return None
    if not require_object(node, "globalStage", errors):
        return None

    values: list[float] = []
    for name in _FIELDS:
        # First failure wins; the remaining fields are not inspected.
        if name not in node:
            errors.append(f"field: globalStage is missing required field: {name}")
            return None
        if not is_kind(node[name], "double"):
            errors.append(f"field: globalStage/{name} isn't a number")
            return None
        values.append(float(node[name]))

    e, n, u, lat0, lon0, h0 = values
    return GlobalStage(e=e, n=n, u=u, lat0=lat0, lon0=lon0, h0=h0)
