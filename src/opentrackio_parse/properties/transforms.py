from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from opentrackio_parse.decode.helpers import find_section
from opentrackio_parse.decode.primitives import parse_transform
from opentrackio_parse.decode.types import Transform


@dataclass
class Transforms:
    transforms: list[Transform] = field(default_factory=list)

    def combined_matrix(self) -> np.ndarray:
        """Product of the transform chain in document order (root first)."""

        m = np.eye(4, dtype=np.float64)
        for tf in self.transforms:
            m = m @ tf.to_matrix()
        return m


def parse_transforms(document: Any, errors: list[str]) -> Transforms | None:
    found, node = find_section(document, "transforms")
    if not found:
        return None
    if not isinstance(node, list):
        errors.append("field: transforms isn't of type: array")
        return None

    tfs = Transforms()
    for index, item in enumerate(node):
        tf = parse_transform(item, errors, f"transforms/{index}")
        if tf is not None:
            tfs.transforms.append(tf)
    return tfs
