# agents/travel_preferences_agent.py
from __future__ import annotations
from typing import Any, Dict, Iterable, Tuple

from models.preferences import DEFAULT_BUDGET, PreferenceInput
from utils.money import coerce_budget


class TravelPreferencesAgent:
    """
    Validates/normalizes suggestion-form input into PreferenceInput.
    Works with either a raw dict OR an already built PreferenceInput.
    """

    def normalize(self, raw: Any) -> PreferenceInput:
        if isinstance(raw, PreferenceInput):
            d: Dict[str, Any] = {
                "travel_type": raw.travel_type,
                "travel_style": raw.travel_style,
                "duration": raw.duration,
                "budget": raw.budget,
                "interests": raw.interests,
            }
        elif isinstance(raw, dict):
            d = raw
        else:
            raise TypeError("TravelPreferencesAgent.normalize expects PreferenceInput or dict")

        # Form field names from the page are accepted too (travelType, travelStyle).
        return PreferenceInput(
            travel_type=self._choice(d.get("travel_type", d.get("travelType")), "solo"),
            travel_style=self._choice(d.get("travel_style", d.get("travelStyle")), "relaxation"),
            duration=self._choice(d.get("duration"), "week"),
            budget=coerce_budget(d.get("budget"), DEFAULT_BUDGET),
            interests=self._interests(d.get("interests")),
        )

    def _choice(self, value: Any, default: str) -> str:
        text = str(value).strip() if value is not None else ""
        return text or default

    def _interests(self, value: Any) -> Tuple[str, ...]:
        if not value:
            return ()
        items: Iterable[Any] = [value] if isinstance(value, str) else value
        seen = set()
        cleaned = []
        for item in items:
            text = str(item).strip()
            if text and text not in seen:
                seen.add(text)
                cleaned.append(text)
        return tuple(cleaned)
