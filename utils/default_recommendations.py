# utils/default_recommendations.py
from __future__ import annotations
import copy
from typing import Any, Dict

# Shown whenever the model reply can't be turned into recommendations.
DEFAULT_RECOMMENDATIONS: Dict[str, Any] = {
    "recommendations": [
        {
            "destination": "Bali, Indonesia",
            "description": "Tropical paradise with stunning beaches, ancient temples, and vibrant culture. Perfect for relaxation and adventure.",
            "whyMatch": "Offers great value for money with diverse activities and beautiful scenery.",
            "costRange": "$800 - $1,200",
            "bestTime": "April to October",
            "activities": ["Temple hopping", "Beach relaxation", "Rice terrace tours"],
            "emoji": "🏝️",
        },
        {
            "destination": "Prague, Czech Republic",
            "description": "Fairytale city with medieval architecture, rich history, and affordable luxury. Great for culture enthusiasts.",
            "whyMatch": "Perfect blend of history, culture, and budget-friendly options.",
            "costRange": "$600 - $1,000",
            "bestTime": "May to September",
            "activities": ["Castle tours", "River cruises", "Beer tasting"],
            "emoji": "🏰",
        },
        {
            "destination": "Costa Rica",
            "description": "Adventure paradise with incredible biodiversity, beaches, and eco-tourism opportunities.",
            "whyMatch": "Ideal for nature lovers and adventure seekers with sustainable tourism focus.",
            "costRange": "$1,000 - $1,500",
            "bestTime": "December to April",
            "activities": ["Wildlife watching", "Zip-lining", "Volcano tours"],
            "emoji": "🌿",
        },
    ]
}


def default_recommendations() -> Dict[str, Any]:
    """Fresh copy so callers can't mutate the shared table."""
    return copy.deepcopy(DEFAULT_RECOMMENDATIONS)
