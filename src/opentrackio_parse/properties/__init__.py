from .camera import Camera, parse_camera
from .duration import Duration, parse_duration
from .global_stage import GlobalStage, parse_global_stage
from .identifiers import RelatedSampleIds, SampleId, StreamId, parse_related_sample_ids, parse_sample_id, parse_stream_id
from .lens import Distortion, Encoders, ExposureFalloff, Lens, RawEncoders, Shift, parse_lens
from .protocol import Protocol, parse_protocol
from .timing import (
    Offsets,
    Ptp,
    Synchronization,
    SynchronizationSource,
    Timing,
    TimingMode,
    parse_synchronization,
    parse_timing,
)
from .tracker import Tracker, parse_tracker
from .transforms import Transforms, parse_transforms

__all__ = [
    "Camera",
    "Distortion",
    "Duration",
    "Encoders",
    "ExposureFalloff",
    "GlobalStage",
    "Lens",
    "Offsets",
    "Protocol",
    "Ptp",
    "RawEncoders",
    "RelatedSampleIds",
    "SampleId",
    "Shift",
    "StreamId",
    "Synchronization",
    "SynchronizationSource",
    "Timing",
    "TimingMode",
    "Tracker",
    "Transforms",
    "parse_camera",
    "parse_duration",
    "parse_global_stage",
    "parse_lens",
    "parse_protocol",
    "parse_related_sample_ids",
    "parse_sample_id",
    "parse_stream_id",
    "parse_synchronization",
    "parse_timing",
    "parse_tracker",
    "parse_transforms",
]
