from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level}")
    return resolved


def configure_logging(level: str, log_file: Path | None = None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=resolve_level(level), format=LOG_FORMAT, handlers=handlers, force=True)


def log_diagnostics(logger: logging.Logger, label: str, errors: Iterable[str]) -> None:
    for message in errors:
        logger.warning("%s: %s", label, message)
