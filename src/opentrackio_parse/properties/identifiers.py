from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from opentrackio_parse.decode.helpers import UUID_PATTERN, assign_regex_field, find_section, is_kind


@dataclass
class SampleId:
    value: str


@dataclass
class StreamId:
    value: str


@dataclass
class RelatedSampleIds:
    samples: list[str] = field(default_factory=list)


def parse_sample_id(document: Any, errors: list[str]) -> SampleId | None:
    value = assign_regex_field(document, "sampleId", UUID_PATTERN, errors)
    if value is None:
        return None
    return SampleId(value=value)


def parse_stream_id(document: Any, errors: list[str]) -> StreamId | None:
    value = assign_regex_field(document, "streamId", UUID_PATTERN, errors)
    if value is None:
        return None
    return StreamId(value=value)


def parse_related_sample_ids(document: Any, errors: list[str]) -> RelatedSampleIds | None:
    """Keep every valid id; invalid elements are reported and skipped."""

    found, node = find_section(document, "relatedSampleIds")
    if not found:
        return None
    if not isinstance(node, list):
        errors.append("field: relatedSampleIds isn't of type: array")
        return None

    related = RelatedSampleIds()
    for item in node:
        if not is_kind(item, "string"):
            errors.append("field: relatedSampleIds/element isn't of type: string")
            continue
        if UUID_PATTERN.fullmatch(item) is None:
            errors.append("field: relatedSampleIds/element doesn't match required pattern")
            continue
        related.samples.append(item)
    return related
