from __future__ import annotations

from dataclasses import dataclass
import enum
from typing import Any

from opentrackio_parse.decode.helpers import (
    MAC_ADDRESS_PATTERN,
    assign_field,
    assign_regex_field,
    find_section,
    is_kind,
    require_object,
)
from opentrackio_parse.decode.primitives import parse_rational, parse_timecode, parse_timestamp
from opentrackio_parse.decode.types import Rational, Timecode, Timestamp


MODE_POLICIES = ("strict", "permissive")


class TimingMode(str, enum.Enum):
    EXTERNAL = "external"
    INTERNAL = "internal"


class SynchronizationSource(str, enum.Enum):
    GEN_LOCK = "genlock"
    VIDEO_IN = "videoIn"
    PTP = "ptp"
    NTP = "ntp"


@dataclass
class Offsets:
    translation: float | None = None
    rotation: float | None = None
    lens_encoders: float | None = None


@dataclass
class Ptp:
    domain: int | None = None
    offset: float | None = None
    master: str | None = None


@dataclass
class Synchronization:
    frequency: Rational
    locked: bool
    source: SynchronizationSource
    offsets: Offsets | None = None
    present: bool | None = None
    ptp: Ptp | None = None


@dataclass
class Timing:
    frame_rate: Rational | None = None
    mode: TimingMode | None = None
    recorded_timestamp: Timestamp | None = None
    sample_timestamp: Timestamp | None = None
    sequence_number: int | None = None
    synchronization: Synchronization | None = None
    timecode: Timecode | None = None


_SYNC_PATH = "timing/synchronization"


def _parse_mode(node: dict[str, Any], errors: list[str], policy: str) -> TimingMode | None:
    value = assign_field(node, "mode", "string", errors, "timing")
    if value is None:
        return None
    if value == "external":
        return TimingMode.EXTERNAL
    if value == "internal" or policy == "permissive":
        return TimingMode.INTERNAL
    errors.append("field: timing/mode has an invalid string value")
    return None


def parse_synchronization(node: Any, errors: list[str]) -> Synchronization | None:
    """Parse ``timing.synchronization``; frequency, locked and source are required."""

    if not require_object(node, _SYNC_PATH, errors):
        return None
    if not all(name in node for name in ("frequency", "locked", "source")):
        errors.append(f"field: {_SYNC_PATH} is missing required fields")
        return None

    frequency = parse_rational(node["frequency"], errors, f"{_SYNC_PATH}/frequency")
    if frequency is None:
        return None

    locked = node["locked"]
    if not is_kind(locked, "boolean"):
        errors.append(f"field: {_SYNC_PATH}/locked isn't of type: boolean")
        return None

    source_str = node["source"]
    if not is_kind(source_str, "string"):
        errors.append(f"field: {_SYNC_PATH}/source isn't of type: string")
        return None
    try:
        source = SynchronizationSource(source_str)
    except ValueError:
        errors.append(f"field: {_SYNC_PATH}/source isn't a valid enumeration")
        return None

    sync = Synchronization(frequency=frequency, locked=locked, source=source)

    if "offsets" in node and require_object(node["offsets"], f"{_SYNC_PATH}/offsets", errors):
        path = f"{_SYNC_PATH}/offsets"
        offsets = Offsets(
            translation=assign_field(node["offsets"], "translation", "double", errors, path),
            rotation=assign_field(node["offsets"], "rotation", "double", errors, path),
            lens_encoders=assign_field(node["offsets"], "lensEncoders", "double", errors, path),
        )
        if any(v is not None for v in (offsets.translation, offsets.rotation, offsets.lens_encoders)):
            sync.offsets = offsets

    sync.present = assign_field(node, "present", "boolean", errors, _SYNC_PATH)

    if "ptp" in node and require_object(node["ptp"], f"{_SYNC_PATH}/ptp", errors):
        path = f"{_SYNC_PATH}/ptp"
        ptp = Ptp(
            domain=assign_field(node["ptp"], "domain", "uint16", errors, path),
            offset=assign_field(node["ptp"], "offset", "double", errors, path),
            master=assign_regex_field(node["ptp"], "master", MAC_ADDRESS_PATTERN, errors, path),
        )
        if any(v is not None for v in (ptp.domain, ptp.offset, ptp.master)):
            sync.ptp = ptp

    return sync


def parse_timing(document: Any, errors: list[str], mode_policy: str = "strict") -> Timing | None:
    """Parse the ``timing`` section.

    ``mode_policy="permissive"`` maps any mode other than ``external`` to
    INTERNAL instead of reporting it.
    """

    if mode_policy not in MODE_POLICIES:
        raise ValueError(f"unknown timing mode policy: {mode_policy}")

    found, node = find_section(document, "timing")
    if not found:
        return None
    if not require_object(node, "timing", errors):
        return None

    timing = Timing()
    if "frameRate" in node:
        timing.frame_rate = parse_rational(node["frameRate"], errors, "timing/frameRate")
    timing.mode = _parse_mode(node, errors, mode_policy)
    if "recordedTimestamp" in node:
        timing.recorded_timestamp = parse_timestamp(node["recordedTimestamp"], errors, "timing/recordedTimestamp")
    if "sampleTimestamp" in node:
        timing.sample_timestamp = parse_timestamp(node["sampleTimestamp"], errors, "timing/sampleTimestamp")
    timing.sequence_number = assign_field(node, "sequenceNumber", "uint16", errors, "timing")
    if "synchronization" in node:
        timing.synchronization = parse_synchronization(node["synchronization"], errors)
    if "timecode" in node:
        timing.timecode = parse_timecode(node["timecode"], errors, "timing/timecode")
    return timing
