from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from opentrackio_parse.decode.helpers import assign_field, field_path, find_section, require_object
from opentrackio_parse.decode.types import Rational


@dataclass
class Distortion:
    radial: list[float]
    tangential: list[float] | None = None


@dataclass
class Shift:
    x: float
    y: float


@dataclass
class Encoders:
    """Normalised (0-1) focus, iris and zoom encoder values."""

    focus: float | None = None
    iris: float | None = None
    zoom: float | None = None


@dataclass
class RawEncoders:
    focus: int | None = None
    iris: int | None = None
    zoom: int | None = None


@dataclass
class ExposureFalloff:
    a1: float
    a2: float | None = None
    a3: float | None = None


@dataclass
class Lens:
    # static
    firmware_version: str | None = None
    make: str | None = None
    model: str | None = None
    nominal_focal_length: float | None = None
    serial_number: str | None = None
    # per sample
    custom: list[float] | None = None
    distortion: Distortion | None = None
    distortion_overscan: float | None = None
    distortion_scale: float | None = None
    distortion_shift: Shift | None = None
    encoders: Encoders | None = None
    entrance_pupil_offset: Rational | None = None
    exposure_falloff: ExposureFalloff | None = None
    f_stop: int | None = None
    focal_length: float | None = None
    focus_distance: int | None = None
    perspective_shift: Shift | None = None
    raw_encoders: RawEncoders | None = None
    t_stop: int | None = None
    undistortion: Distortion | None = None


def _parse_members(
    node: dict[str, Any],
    name: str,
    members: tuple[tuple[str, str], ...],
    errors: list[str],
) -> dict[str, Any] | None:
    """Parse every member of a nested group; collapse rules are applied by the caller."""

    if name not in node:
        return None
    path = field_path(name, "lens")
    group = node[name]
    if not require_object(group, path, errors):
        return None
    return {member: assign_field(group, member, kind, errors, path) for member, kind in members}


def _distortion(node: dict[str, Any], name: str, errors: list[str]) -> Distortion | None:
    values = _parse_members(node, name, (("radial", "double[]"), ("tangential", "double[]")), errors)
    if values is None or values["radial"] is None:
        return None
    return Distortion(radial=values["radial"], tangential=values["tangential"])


def _shift(node: dict[str, Any], name: str, errors: list[str]) -> Shift | None:
    values = _parse_members(node, name, (("x", "double"), ("y", "double")), errors)
    if values is None or values["x"] is None or values["y"] is None:
        return None
    return Shift(x=values["x"], y=values["y"])


def _parse_static(node: dict[str, Any], lens: Lens, errors: list[str]) -> None:
    lens.firmware_version = assign_field(node, "firmwareVersion", "string", errors, "static/lens")
    lens.make = assign_field(node, "make", "string", errors, "static/lens")
    lens.model = assign_field(node, "model", "string", errors, "static/lens")
    lens.nominal_focal_length = assign_field(node, "nominalFocalLength", "double", errors, "static/lens")
    lens.serial_number = assign_field(node, "serialNumber", "string", errors, "static/lens")


def _parse_standard(node: dict[str, Any], lens: Lens, errors: list[str]) -> None:
    lens.custom = assign_field(node, "custom", "double[]", errors, "lens")
    lens.distortion = _distortion(node, "distortion", errors)
    lens.distortion_overscan = assign_field(node, "distortionOverscan", "double", errors, "lens")
    lens.distortion_scale = assign_field(node, "distortionScale", "double", errors, "lens")
    lens.distortion_shift = _shift(node, "distortionShift", errors)

    encoders = _parse_members(node, "encoders", (("focus", "double"), ("iris", "double"), ("zoom", "double")), errors)
    if encoders is not None and any(v is not None for v in encoders.values()):
        lens.encoders = Encoders(**encoders)

    offset = _parse_members(node, "entrancePupilOffset", (("num", "int64"), ("denom", "int64")), errors)
    if offset is not None and offset["num"] is not None and offset["denom"] is not None:
        lens.entrance_pupil_offset = Rational(num=offset["num"], denom=offset["denom"])

    falloff = _parse_members(node, "exposureFalloff", (("a1", "double"), ("a2", "double"), ("a3", "double")), errors)
    if falloff is not None and falloff["a1"] is not None:
        lens.exposure_falloff = ExposureFalloff(**falloff)

    lens.f_stop = assign_field(node, "fStop", "uint32", errors, "lens")
    lens.focal_length = assign_field(node, "focalLength", "double", errors, "lens")
    lens.focus_distance = assign_field(node, "focusDistance", "uint32", errors, "lens")
    lens.perspective_shift = _shift(node, "perspectiveShift", errors)

    raw = _parse_members(node, "rawEncoders", (("focus", "uint32"), ("iris", "uint32"), ("zoom", "uint32")), errors)
    if raw is not None and any(v is not None for v in raw.values()):
        lens.raw_encoders = RawEncoders(**raw)

    lens.t_stop = assign_field(node, "tStop", "uint32", errors, "lens")
    lens.undistortion = _distortion(node, "undistortion", errors)


def parse_lens(document: Any, errors: list[str]) -> Lens | None:
    """Merge ``static.lens`` and ``lens`` into one Lens.

    A section of the wrong kind is reported and skipped; the result is absent
    only when neither section could be read.
    """

    has_static, static_node = find_section(document, "static", "lens")
    has_standard, standard_node = find_section(document, "lens")
    if not has_static and not has_standard:
        return None

    lens = Lens()
    parsed_any = False
    if has_static and require_object(static_node, "static/lens", errors):
        _parse_static(static_node, lens, errors)
        parsed_any = True
    if has_standard and require_object(standard_node, "lens", errors):
        _parse_standard(standard_node, lens, errors)
        parsed_any = True

    return lens if parsed_any else None
