from .base import DecodeError, PropertyDecoder, SampleValidationError
from .helpers import MAC_ADDRESS_PATTERN, UUID_PATTERN, VERSION_PATTERN, assign_field, assign_regex_field, populate_sequence
from .primitives import parse_dimensions, parse_rational, parse_timecode, parse_timestamp, parse_transform
from .types import Dimensions, Rational, Rotation, Timecode, TimecodeFormat, Timestamp, Transform, Vector3

__all__ = [
    "DecodeError",
    "PropertyDecoder",
    "SampleValidationError",
    "MAC_ADDRESS_PATTERN",
    "UUID_PATTERN",
    "VERSION_PATTERN",
    "assign_field",
    "assign_regex_field",
    "populate_sequence",
    "parse_dimensions",
    "parse_rational",
    "parse_timecode",
    "parse_timestamp",
    "parse_transform",
    "Dimensions",
    "Rational",
    "Rotation",
    "Timecode",
    "TimecodeFormat",
    "Timestamp",
    "Transform",
    "Vector3",
]
