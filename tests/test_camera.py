from __future__ import annotations

from opentrackio_parse.decode.types import Dimensions, Rational
from opentrackio_parse.properties.camera import parse_camera


def _doc(**camera: object) -> dict:
    return {"static": {"camera": camera}}


def test_camera_absent_without_errors() -> None:
    errors: list[str] = []
    assert parse_camera({"static": {"lens": {}}}, errors) is None
    assert parse_camera({}, errors) is None
    assert errors == []


def test_camera_wrong_type() -> None:
    errors: list[str] = []
    assert parse_camera({"static": {"camera": []}}, errors) is None
    assert errors == ["field: camera isn't of type: object"]


def test_camera_full() -> None:
    errors: list[str] = []
    cam = parse_camera(
        _doc(
            activeSensorPhysicalDimensions={"width": 36.7, "height": 25.54},
            activeSensorResolution={"width": 3840, "height": 2160},
            anamorphicSqueeze={"num": 2, "denom": 1},
            captureFrameRate={"num": 24000, "denom": 1001},
            firmwareVersion="7.1",
            label="A",
            make="ARRI",
            model="Alexa 35",
            serialNumber="1234",
            fdlLink="urn:uuid:12345678-1234-1234-1234-123456789abc",
            isoSpeed=800,
            shutterAngle=180000,
        ),
        errors,
    )
    assert errors == []
    assert cam is not None
    assert cam.active_sensor_physical_dimensions == Dimensions(36.7, 25.54)
    assert cam.active_sensor_resolution == Dimensions(3840, 2160)
    assert cam.anamorphic_squeeze == Rational(2, 1)
    assert cam.capture_frame_rate == Rational(24000, 1001)
    assert cam.make == "ARRI"
    assert cam.iso_speed == 800
    assert cam.shutter_angle == 180000


def test_camera_shutter_angle_out_of_range_keeps_siblings() -> None:
    errors: list[str] = []
    cam = parse_camera(_doc(make="ARRI", isoSpeed=800, shutterAngle=400000), errors)
    assert cam is not None
    assert cam.shutter_angle is None
    assert cam.make == "ARRI"
    assert cam.iso_speed == 800
    assert len(errors) == 1
    assert "shutterAngle" in errors[0]
    assert "outside the expected range 1 - 360000" in errors[0]


def test_camera_shutter_angle_zero_is_out_of_range() -> None:
    errors: list[str] = []
    cam = parse_camera(_doc(shutterAngle=0), errors)
    assert cam is not None and cam.shutter_angle is None
    assert errors == ["field: camera/shutterAngle is outside the expected range 1 - 360000"]


def test_camera_bad_fdl_link_and_label_type() -> None:
    errors: list[str] = []
    cam = parse_camera(_doc(fdlLink="urn:uuid:nope", label=3, model="Mini"), errors)
    assert cam is not None
    assert cam.fdl_link is None
    assert cam.label is None
    assert cam.model == "Mini"
    assert errors == [
        "field: camera/label isn't of type: string",
        "field: camera/fdlLink doesn't match required pattern",
    ]


def test_camera_resolution_keeps_integer_pixels() -> None:
    errors: list[str] = []
    cam = parse_camera(_doc(activeSensorResolution={"width": 4096, "height": 2160}), errors)
    assert cam is not None and cam.active_sensor_resolution is not None
    assert isinstance(cam.active_sensor_resolution.width, int)
    assert isinstance(cam.active_sensor_resolution.height, int)
    assert errors == []
