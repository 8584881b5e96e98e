from .config import DecodeConfig, load_config
from .decode import DecodeError, SampleValidationError
from .sample import Sample, parse_sample, parse_sample_json

__version__ = "0.1.0"

__all__ = [
    "DecodeConfig",
    "DecodeError",
    "Sample",
    "SampleValidationError",
    "load_config",
    "parse_sample",
    "parse_sample_json",
    "__version__",
]
