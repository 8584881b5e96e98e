from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from opentrackio_parse.decode.helpers import (
    UUID_PATTERN,
    assign_field,
    assign_regex_field,
    check_range,
    find_section,
    require_object,
)
from opentrackio_parse.decode.primitives import parse_dimensions, parse_rational
from opentrackio_parse.decode.types import Dimensions, Rational


SHUTTER_ANGLE_RANGE = (1, 360000)


@dataclass
class Camera:
    active_sensor_physical_dimensions: Dimensions | None = None
    active_sensor_resolution: Dimensions | None = None
    anamorphic_squeeze: Rational | None = None
    firmware_version: str | None = None
    label: str | None = None
    make: str | None = None
    model: str | None = None
    serial_number: str | None = None
    capture_frame_rate: Rational | None = None
    fdl_link: str | None = None
    iso_speed: int | None = None
    shutter_angle: int | None = None


def parse_camera(document: Any, errors: list[str]) -> Camera | None:
    found, node = find_section(document, "static", "camera")
    if not found:
        return None
    if not require_object(node, "camera", errors):
        return None

    cam = Camera()
    if "activeSensorPhysicalDimensions" in node:
        cam.active_sensor_physical_dimensions = parse_dimensions(
            node["activeSensorPhysicalDimensions"], errors, "camera/activeSensorPhysicalDimensions"
        )
    if "activeSensorResolution" in node:
        cam.active_sensor_resolution = parse_dimensions(
            node["activeSensorResolution"], errors, "camera/activeSensorResolution", kind="uint32"
        )
    if "anamorphicSqueeze" in node:
        cam.anamorphic_squeeze = parse_rational(node["anamorphicSqueeze"], errors, "camera/anamorphicSqueeze")

    cam.firmware_version = assign_field(node, "firmwareVersion", "string", errors, "camera")
    cam.label = assign_field(node, "label", "string", errors, "camera")
    cam.make = assign_field(node, "make", "string", errors, "camera")
    cam.model = assign_field(node, "model", "string", errors, "camera")
    cam.serial_number = assign_field(node, "serialNumber", "string", errors, "camera")

    if "captureFrameRate" in node:
        cam.capture_frame_rate = parse_rational(node["captureFrameRate"], errors, "camera/captureFrameRate")

    cam.fdl_link = assign_regex_field(node, "fdlLink", UUID_PATTERN, errors, "camera")
    cam.iso_speed = assign_field(node, "isoSpeed", "integer", errors, "camera")

    low, high = SHUTTER_ANGLE_RANGE
    shutter_angle = assign_field(node, "shutterAngle", "integer", errors, "camera")
    cam.shutter_angle = check_range(shutter_angle, low, high, "camera/shutterAngle", errors)
    return cam
