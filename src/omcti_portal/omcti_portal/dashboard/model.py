from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class CenterStrength:
    center_id: str
    center_name: str
    center_code: str
    counts: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Overview:
    """Dashboard payload; sections that failed to load stay empty and are named in `errors`."""

    summary: Optional[dict] = None
    counts: Optional[dict] = None
    strength: list[CenterStrength] = field(default_factory=list)
    totals: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "summary": self.summary,
            "counts": self.counts,
            "strength": [
                {"center_id": s.center_id, "center_name": s.center_name, "center_code": s.center_code, **s.counts}
                for s in self.strength
            ],
            "totals": self.totals,
            "errors": self.errors,
        }
