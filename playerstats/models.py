"""Data models for player statistics."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class LevelStat:
    """Stat values for one level column of a player table."""

    level: Optional[Number]
    values: Dict[str, Optional[Number]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Optional[Number]]:
        record: Dict[str, Optional[Number]] = {"level": self.level}
        record.update(self.values)
        return record


@dataclass(frozen=True)
class PlayerRecord:
    """Single player block extracted from a page."""

    name: str
    key_techniques: List[str]
    location: str
    region: str
    stats: List[LevelStat] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "keyTechniques": list(self.key_techniques),
            "location": self.location,
            "stats": [stat.to_dict() for stat in self.stats],
            "region": self.region,
        }
