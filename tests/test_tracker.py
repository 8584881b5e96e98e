from __future__ import annotations

from opentrackio_parse.properties.tracker import Tracker, parse_tracker


def test_tracker_absent() -> None:
    errors: list[str] = []
    assert parse_tracker({"static": {}}, errors) is None
    assert errors == []


def test_tracker_static_and_standard() -> None:
    doc = {
        "static": {"tracker": {"firmwareVersion": "1.0", "make": "Mo-Sys", "model": "StarTracker", "serialNumber": "1"}},
        "tracker": {"notes": "test", "recording": False, "slate": "A101_A_4", "status": "Optical Good"},
    }
    errors: list[str] = []
    assert parse_tracker(doc, errors) == Tracker(
        firmware_version="1.0",
        make="Mo-Sys",
        model="StarTracker",
        serial_number="1",
        notes="test",
        recording=False,
        slate="A101_A_4",
        status="Optical Good",
    )
    assert errors == []


def test_tracker_recording_must_be_boolean() -> None:
    errors: list[str] = []
    tkr = parse_tracker({"tracker": {"recording": 1, "status": "ok"}}, errors)
    assert tkr == Tracker(status="ok")
    assert errors == ["field: tracker/recording isn't of type: boolean"]


def test_tracker_wrong_section_type_keeps_other_section() -> None:
    errors: list[str] = []
    tkr = parse_tracker({"static": {"tracker": {"make": "Mo-Sys"}}, "tracker": 5}, errors)
    assert tkr == Tracker(make="Mo-Sys")
    assert errors == ["field: tracker isn't of type: object"]


def test_tracker_only_wrong_section_is_absent() -> None:
    errors: list[str] = []
    assert parse_tracker({"static": {"tracker": "StarTracker"}}, errors) is None
    assert errors == ["field: static/tracker isn't of type: object"]
