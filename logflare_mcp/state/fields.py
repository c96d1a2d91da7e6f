"""Field discovery results (dataclass only)."""

from __future__ import annotations

from typing import Any
from dataclasses import field, dataclass


@dataclass(slots=True)
class FieldInfo:
    type: str
    sample_values: list[Any] = field(default_factory=list)
    is_nested: bool = False

    def to_payload(self) -> dict[str, Any]:
        return {"type": self.type, "sampleValues": list(self.sample_values), "isNested": self.is_nested}


__all__ = ["FieldInfo"]
