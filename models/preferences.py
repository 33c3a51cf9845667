# models/preferences.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from utils.money import coerce_budget

DEFAULT_BUDGET = 3000


@dataclass(frozen=True)
class PreferenceInput:
    travel_type: str = "solo"
    travel_style: str = "relaxation"
    duration: str = "week"
    budget: int = DEFAULT_BUDGET  # per person, USD
    interests: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Interests are a set; sorting keeps the prompt identical for the same selection.
        interests = (self.interests,) if isinstance(self.interests, str) else (self.interests or ())
        object.__setattr__(self, "budget", coerce_budget(self.budget, DEFAULT_BUDGET))
        object.__setattr__(self, "interests", tuple(sorted({str(i) for i in interests})))
