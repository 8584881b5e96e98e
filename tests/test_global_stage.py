from __future__ import annotations

from opentrackio_parse.properties.global_stage import GlobalStage, parse_global_stage


_STAGE = {"E": 100.0, "N": 200.0, "U": 300.0, "lat0": 100.0, "lon0": 200.0, "h0": 300}


def test_global_stage_all_fields() -> None:
    errors: list[str] = []
    gs = parse_global_stage({"globalStage": dict(_STAGE)}, errors)
    assert gs == GlobalStage(100.0, 200.0, 300.0, 100.0, 200.0, 300.0)
    assert isinstance(gs.h0, float)
    assert errors == []


def test_global_stage_missing_field_drops_entity() -> None:
    stage = dict(_STAGE)
    del stage["lon0"]
    errors: list[str] = []
    assert parse_global_stage({"globalStage": stage}, errors) is None
    assert errors == ["field: globalStage is missing required field: lon0"]


def test_global_stage_non_numeric_field() -> None:
    errors: list[str] = []
    assert parse_global_stage({"globalStage": dict(_STAGE, N="north")}, errors) is None
    assert errors == ["field: globalStage/N isn't a number"]


def test_global_stage_absent_and_wrong_type() -> None:
    errors: list[str] = []
    assert parse_global_stage({}, errors) is None
    assert errors == []
    assert parse_global_stage({"globalStage": [1, 2]}, errors) is None
    assert errors == ["field: globalStage isn't of type: object"]
