from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from typing import Any

from opentrackio_parse.config import DecodeConfig
from opentrackio_parse.decode.base import PropertyDecoder, SampleValidationError
from opentrackio_parse.properties import (
    Camera,
    Duration,
    GlobalStage,
    Lens,
    Protocol,
    RelatedSampleIds,
    SampleId,
    StreamId,
    Timing,
    Tracker,
    Transforms,
    parse_camera,
    parse_duration,
    parse_global_stage,
    parse_lens,
    parse_protocol,
    parse_related_sample_ids,
    parse_sample_id,
    parse_stream_id,
    parse_timing,
    parse_tracker,
    parse_transforms,
)
from opentrackio_parse.utils.logging_utils import log_diagnostics


logger = logging.getLogger(__name__)


@dataclass
class Sample:
    camera: Camera | None = None
    duration: Duration | None = None
    global_stage: GlobalStage | None = None
    lens: Lens | None = None
    protocol: Protocol | None = None
    related_sample_ids: RelatedSampleIds | None = None
    sample_id: SampleId | None = None
    stream_id: StreamId | None = None
    timing: Timing | None = None
    tracker: Tracker | None = None
    transforms: Transforms | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise SampleValidationError(self.errors)


def _decoders(config: DecodeConfig) -> dict[str, PropertyDecoder[Any]]:
    # Order is part of the output contract: errors are appended in this order.
    return {
        "camera": parse_camera,
        "duration": parse_duration,
        "global_stage": parse_global_stage,
        "lens": parse_lens,
        "protocol": parse_protocol,
        "related_sample_ids": parse_related_sample_ids,
        "sample_id": parse_sample_id,
        "stream_id": parse_stream_id,
        "timing": lambda doc, errors: parse_timing(doc, errors, mode_policy=config.timing_mode_policy),
        "tracker": parse_tracker,
        "transforms": parse_transforms,
    }


def _label(sample: Sample) -> str:
    return sample.sample_id.value if sample.sample_id is not None else "sample"


def _finish(sample: Sample, config: DecodeConfig) -> Sample:
    decoded = [name for name, value in vars(sample).items() if name != "errors" and value is not None]
    logger.debug("decoded %s: properties=%s errors=%d", _label(sample), ",".join(decoded) or "-", len(sample.errors))
    if config.log_errors:
        log_diagnostics(logger, _label(sample), sample.errors)
    return sample


def parse_sample(document: Any, config: DecodeConfig | None = None) -> Sample:
    """Run every property decoder against one parsed JSON document.

    Never raises on malformed input: whatever could be decoded is returned,
    and every problem found is listed in ``Sample.errors``.
    """

    config = config or DecodeConfig()
    sample = Sample()
    if not isinstance(document, dict):
        sample.errors.append("field: sample isn't of type: object")
        return _finish(sample, config)

    for name, decoder in _decoders(config).items():
        setattr(sample, name, decoder(document, sample.errors))
    return _finish(sample, config)


def parse_sample_json(text: str | bytes, config: DecodeConfig | None = None) -> Sample:
    config = config or DecodeConfig()
    try:
        document = json.loads(text)
    except (ValueError, RecursionError) as exc:
        sample = Sample(errors=[f"sample isn't valid JSON: {exc}"])
        return _finish(sample, config)
    return parse_sample(document, config)
