from __future__ import annotations

from typing import Any, Protocol, TypeVar


T_co = TypeVar("T_co", covariant=True)


class DecodeError(RuntimeError):
    pass


class SampleValidationError(DecodeError):
    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        summary = "; ".join(self.errors[:3])
        if len(self.errors) > 3:
            summary += f" (+{len(self.errors) - 3} more)"
        super().__init__(f"sample has {len(self.errors)} validation error(s): {summary}")


class PropertyDecoder(Protocol[T_co]):
    def __call__(self, document: Any, errors: list[str]) -> T_co | None:
        ...
