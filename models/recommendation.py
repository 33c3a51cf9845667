# models/recommendation.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass
class Recommendation:
    destination: str = ""
    description: str = ""
    why_match: str = ""
    cost_range: str = ""
    best_time: str = ""
    activities: List[str] = field(default_factory=list)
    emoji: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> "Recommendation":
        """
        Builds a renderable card from one raw record.
        Model output is not validated upstream, so anything missing becomes blank.
        """
        if not isinstance(raw, dict):
            return cls()

        activities = raw.get("activities") or []
        if isinstance(activities, str):
            activities = [activities]
        elif not isinstance(activities, (list, tuple)):
            activities = []

        return cls(
            destination=_text(raw.get("destination")),
            description=_text(raw.get("description")),
            why_match=_text(raw.get("whyMatch")),
            cost_range=_text(raw.get("costRange")),
            best_time=_text(raw.get("bestTime")),
            activities=[_text(a) for a in activities if a is not None],
            emoji=_text(raw.get("emoji")),
        )


@dataclass
class RecommendationSet:
    # Records exactly as they came out of the payload (or the default table).
    recommendations: List[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.recommendations)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.recommendations)

    def select(self, index: int) -> Any:
        if not 0 <= index < len(self.recommendations):
            raise IndexError(
                f"recommendation index {index} out of range (0..{len(self.recommendations) - 1})"
            )
        return self.recommendations[index]

    def selection(self, index: int) -> Dict[str, str]:
        """Projection handed to the specific-destination form."""
        return {"destination": Recommendation.from_dict(self.select(index)).destination}

    def cards(self) -> List[Recommendation]:
        return [Recommendation.from_dict(r) for r in self.recommendations]
