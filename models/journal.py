# models/journal.py

import math
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class JournalEntry:
    """Free-text reflective note; timestamp is epoch milliseconds"""
    id: str
    date: str
    content: str
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date,
            "content": self.content,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JournalEntry":
        return cls(
            id=str(data["id"]),
            date=str(data["date"]),
            content=str(data.get("content", "")),
            timestamp=_parse_timestamp(data["timestamp"]),
        )


def _parse_timestamp(value: Any) -> int:
    if isinstance(value, bool) or not math.isfinite(float(value)):
        raise ValueError(f"invalid timestamp: {value!r}")
    return int(value)
