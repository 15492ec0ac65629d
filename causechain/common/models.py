"""Data models used when reporting cause chains."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class CauseRecord:
    depth: int
    type_name: str
    message: str
    is_root: bool

    @classmethod
    def from_exception(cls, error: BaseException, *, depth: int, is_root: bool) -> "CauseRecord":
        error_type = type(error)
        return cls(
            depth=depth,
            type_name=f"{error_type.__module__}.{error_type.__qualname__}",
            message=str(error),
            is_root=is_root,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
