from __future__ import annotations

import json
import logging

import pytest

from opentrackio_parse import DecodeConfig, SampleValidationError, parse_sample, parse_sample_json
from opentrackio_parse.properties import TimingMode


SAMPLE_ID = "urn:uuid:12345678-1234-1234-1234-123456789abc"


def _document() -> dict:
    return {
        "static": {
            "camera": {"make": "ARRI", "shutterAngle": 400000},
            "duration": {"num": 1, "denom": 25},
            "lens": {"make": "Cooke"},
            "tracker": {"make": "Mo-Sys"},
        },
        "globalStage": {"E": 1, "N": 2, "U": 3, "lat0": 4, "lon0": 5, "h0": 6},
        "lens": {"focalLength": 35.0},
        "protocol": {"name": "OpenTrackIO", "version": "1.0"},
        "relatedSampleIds": [SAMPLE_ID, "bad-id"],
        "sampleId": SAMPLE_ID,
        "streamId": "not-a-uuid",
        "timing": {"mode": "internal", "sequenceNumber": 1},
        "tracker": {"recording": True},
        "transforms": [
            {"translation": {"x": 0, "y": 0, "z": 0}, "rotation": {"pan": 0, "tilt": 0, "roll": 0}, "id": "Camera"}
        ],
    }


def test_parse_sample_collects_every_property() -> None:
    sample = parse_sample(_document())
    assert sample.camera is not None and sample.camera.make == "ARRI"
    assert sample.duration is not None
    assert sample.global_stage is not None
    assert sample.lens is not None and sample.lens.focal_length == 35.0
    assert sample.protocol is None
    assert sample.related_sample_ids is not None and sample.related_sample_ids.samples == [SAMPLE_ID]
    assert sample.sample_id is not None and sample.sample_id.value == SAMPLE_ID
    assert sample.stream_id is None
    assert sample.timing is not None and sample.timing.mode is TimingMode.INTERNAL
    assert sample.tracker is not None and sample.tracker.recording is True
    assert sample.transforms is not None and len(sample.transforms.transforms) == 1
    assert sample.errors == [
        "field: camera/shutterAngle is outside the expected range 1 - 360000",
        "field: protocol/version doesn't match required pattern",
        "field: relatedSampleIds/element doesn't match required pattern",
        "field: streamId doesn't match required pattern",
    ]
    assert not sample.is_valid


def test_parse_sample_is_deterministic() -> None:
    first = parse_sample(_document())
    second = parse_sample(_document())
    assert first == second
    assert first.errors == second.errors


def test_parse_sample_empty_document() -> None:
    sample = parse_sample({})
    assert sample.errors == []
    assert sample.is_valid
    assert sample.camera is None and sample.timing is None


def test_parse_sample_non_object_root() -> None:
    sample = parse_sample([1, 2, 3])
    assert sample.errors == ["field: sample isn't of type: object"]


def test_parse_sample_json_invalid_text() -> None:
    sample = parse_sample_json("{not json")
    assert len(sample.errors) == 1
    assert sample.errors[0].startswith("sample isn't valid JSON")


def test_parse_sample_json_round_trips_document() -> None:
    assert parse_sample_json(json.dumps(_document())) == parse_sample(_document())


def test_parse_sample_honours_timing_mode_policy() -> None:
    doc = {"timing": {"mode": "freerun"}}
    strict = parse_sample(doc)
    permissive = parse_sample(doc, DecodeConfig(timing_mode_policy="permissive"))
    assert strict.timing is not None and strict.timing.mode is None
    assert permissive.timing is not None and permissive.timing.mode is TimingMode.INTERNAL
    assert permissive.errors == []


def test_raise_for_errors() -> None:
    parse_sample({}).raise_for_errors()
    with pytest.raises(SampleValidationError) as excinfo:
        parse_sample({"sampleId": "nope"}).raise_for_errors()
    assert excinfo.value.errors == ["field: sampleId doesn't match required pattern"]


def test_errors_are_logged_when_enabled(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="opentrackio_parse.sample"):
        parse_sample({"streamId": "nope"})
        parse_sample({"streamId": "nope"}, DecodeConfig(log_errors=False))
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert warnings == ["sample: field: streamId doesn't match required pattern"]


def test_parse_sample_json_deeply_nested_text() -> None:
    sample = parse_sample_json("[" * 200000 + "]" * 200000)
    assert len(sample.errors) == 1
    assert sample.errors[0].startswith("sample isn't valid JSON")
    assert sample.timing is None


def test_parse_sample_json_oversized_integer_literal() -> None:
    sample = parse_sample_json('{"timing": {"sequenceNumber": ' + "9" * 5000 + "}}")
    assert len(sample.errors) == 1
    assert sample.errors[0].startswith("sample isn't valid JSON")
    assert sample.timing is None
