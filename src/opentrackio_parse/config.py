from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from opentrackio_parse.properties.timing import MODE_POLICIES
from opentrackio_parse.utils.logging_utils import configure_logging, resolve_level


@dataclass
class DecodeConfig:
    log_level: str = "INFO"
    log_file: Path | None = None
    log_errors: bool = True
    timing_mode_policy: str = "strict"

    def __post_init__(self) -> None:
        if self.timing_mode_policy not in MODE_POLICIES:
            raise ValueError(
                f"timing_mode_policy must be one of {', '.join(MODE_POLICIES)}, got {self.timing_mode_policy!r}"
            )
        resolve_level(self.log_level)

    def apply_logging(self) -> None:
        configure_logging(self.log_level, self.log_file)


def _expand_path(value: str | None, base: Path) -> Path | None:
    if value in (None, ""):
        return None
    path = Path(value)
    if not path.is_absolute():
        path = (base / path).resolve()
    return path


def _as_bool(raw: dict[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"config key {key} must be true or false")
    return value


def load_config(path: str | Path) -> DecodeConfig:
    try:
        import yaml  # type: ignore
    except Exception as exc:
        raise RuntimeError("PyYAML is required for config loading. Install with: pip install PyYAML") from exc

    cfg_path = Path(path).expanduser().resolve()
    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"config root must be a mapping: {cfg_path}")

    base = cfg_path.parent
    decode_raw = raw.get("decode", {}) or {}
    config = DecodeConfig(
        log_level=str(raw.get("log_level", "INFO")),
        log_file=_expand_path(raw.get("log_file"), base),
        log_errors=_as_bool(decode_raw, "log_errors", True),
        timing_mode_policy=str(decode_raw.get("timing_mode_policy", "strict")),
    )

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
    return config
