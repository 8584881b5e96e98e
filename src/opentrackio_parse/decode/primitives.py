from __future__ import annotations

from typing import Any

from .helpers import assign_field, check_range, field_path, require_object
from .types import Dimensions, Rational, Rotation, Timecode, TimecodeFormat, Timestamp, Transform, Vector3


def _missing_required(path: str, errors: list[str]) -> None:
    errors.append(f"field: {path} is missing required fields")


def parse_rational(
    node: Any,
    errors: list[str],
    path: str = "rational",
    num_kind: str = "int32",
    denom_kind: str = "uint32",
) -> Rational | None:
    if not require_object(node, path, errors):
        return None

    num = assign_field(node, "num", num_kind, errors, path)
    denom = assign_field(node, "denom", denom_kind, errors, path)
    if num is None or denom is None:
        _missing_required(path, errors)
        return None
    return Rational(num=num, denom=denom)


def parse_dimensions(node: Any, errors: list[str], path: str = "dimensions", kind: str = "double") -> Dimensions | None:
    if not require_object(node, path, errors):
        return None

    width = assign_field(node, "width", kind, errors, path)
    height = assign_field(node, "height", kind, errors, path)
    if width is None or height is None:
        _missing_required(path, errors)
        return None
    return Dimensions(width=width, height=height)


def parse_timestamp(node: Any, errors: list[str], path: str = "timestamp") -> Timestamp | None:
    if not require_object(node, path, errors):
        return None

    seconds = assign_field(node, "seconds", "uint48", errors, path)
    nanoseconds = assign_field(node, "nanoseconds", "uint32", errors, path)
    attoseconds = assign_field(node, "attoseconds", "uint32", errors, path)
    if seconds is None or nanoseconds is None:
        _missing_required(path, errors)
        return None
    return Timestamp(seconds=seconds, nanoseconds=nanoseconds, attoseconds=attoseconds)


def _parse_timecode_format(node: Any, errors: list[str], path: str) -> TimecodeFormat | None:
    if not require_object(node, path, errors):
        return None

    frame_rate = None
    if "frameRate" in node:
        frame_rate = parse_rational(node["frameRate"], errors, field_path("frameRate", path))
    drop_frame = assign_field(node, "dropFrame", "boolean", errors, path)
    odd_field = assign_field(node, "oddField", "boolean", errors, path)
    if frame_rate is None:
        _missing_required(path, errors)
        return None
    return TimecodeFormat(frame_rate=frame_rate, drop_frame=drop_frame, odd_field=odd_field)


_TIMECODE_LIMITS = (("hours", 23), ("minutes", 59), ("seconds", 59), ("frames", 119))


def parse_timecode(node: Any, errors: list[str], path: str = "timecode") -> Timecode | None:
    if not require_object(node, path, errors):
        return None

    parts: dict[str, int | None] = {}
    for name, upper in _TIMECODE_LIMITS:
        value = assign_field(node, name, "uint32", errors, path)
        parts[name] = check_range(value, 0, upper, field_path(name, path), errors)

    fmt = None
    if "format" in node:
        fmt = _parse_timecode_format(node["format"], errors, field_path("format", path))

    if fmt is None or any(value is None for value in parts.values()):
        _missing_required(path, errors)
        return None
    return Timecode(
        hours=parts["hours"],
        minutes=parts["minutes"],
        seconds=parts["seconds"],
        frames=parts["frames"],
        format=fmt,
    )


def parse_vector3(node: Any, errors: list[str], path: str = "vector") -> Vector3 | None:
    if not require_object(node, path, errors):
        return None

    x = assign_field(node, "x", "double", errors, path)
    y = assign_field(node, "y", "double", errors, path)
    z = assign_field(node, "z", "double", errors, path)
    if x is None or y is None or z is None:
        _missing_required(path, errors)
        return None
    return Vector3(x=x, y=y, z=z)


def parse_rotation(node: Any, errors: list[str], path: str = "rotation") -> Rotation | None:
    if not require_object(node, path, errors):
        return None

    pan = assign_field(node, "pan", "double", errors, path)
    tilt = assign_field(node, "tilt", "double", errors, path)
    roll = assign_field(node, "roll", "double", errors, path)
    if pan is None or tilt is None or roll is None:
        _missing_required(path, errors)
        return None
    return Rotation(pan=pan, tilt=tilt, roll=roll)


def parse_transform(node: Any, errors: list[str], path: str = "transform") -> Transform | None:
    """Parse one transform; translation and rotation are required."""

    if not require_object(node, path, errors):
        return None

    translation = None
    rotation = None
    scale = None
    if "translation" in node:
        translation = parse_vector3(node["translation"], errors, field_path("translation", path))
    if "rotation" in node:
        rotation = parse_rotation(node["rotation"], errors, field_path("rotation", path))
    if "scale" in node:
        scale = parse_vector3(node["scale"], errors, field_path("scale", path))
    transform_id = assign_field(node, "id", "string", errors, path)
    parent_id = assign_field(node, "parentId", "string", errors, path)

    if translation is None or rotation is None:
        _missing_required(path, errors)
        return None
    return Transform(
        translation=translation,
        rotation=rotation,
        scale=scale,
        transform_id=transform_id,
        parent_transform_id=parent_id,
    )
