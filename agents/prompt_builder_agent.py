# agents/prompt_builder_agent.py
from __future__ import annotations

from models.preferences import PreferenceInput

NO_INTERESTS = "General sightseeing"

PROMPT_TEMPLATE = """As a travel expert, provide exactly 3 travel destination recommendations based on these preferences:

Travel Type: {travel_type}
Travel Style: {travel_style}
Duration: {duration}
Budget: ${budget} per person
Interests: {interests}

For each destination, provide:
1. Destination name and country
2. Brief description (2-3 sentences)
3. Why it matches their preferences
4. Estimated cost range
5. Best time to visit
6. Top 3 activities

Format the response as JSON with this structure:
{{
  "recommendations": [
    {{
      "destination": "City, Country",
      "description": "Brief description...",
      "whyMatch": "Why this matches their preferences...",
      "costRange": "$X - $Y",
      "bestTime": "Season/months",
      "activities": ["Activity 1", "Activity 2", "Activity 3"],
      "emoji": "🏝️" // relevant emoji
    }}
  ]
}}"""


class PromptBuilderAgent:
    def build(self, prefs: PreferenceInput) -> str:
        return build_prompt(prefs)


def build_prompt(prefs: PreferenceInput) -> str:
    return PROMPT_TEMPLATE.format(
        travel_type=prefs.travel_type,
        travel_style=prefs.travel_style,
        duration=prefs.duration,
        budget=prefs.budget,
        interests=", ".join(prefs.interests) or NO_INTERESTS,
    )
