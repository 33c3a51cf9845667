# agents/recommendation_extractor_agent.py
from __future__ import annotations
import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Union

from models.recommendation import RecommendationSet
from utils.default_recommendations import default_recommendations

logger = logging.getLogger(__name__)

# Leftmost "{" through the last "}" in the reply. Backtracks on many unmatched
# braces, but replies are capped by max_tokens so the input stays small.
_JSON_BLOCK = re.compile(r"\{.*\}", re.DOTALL)


class ExtractionFailure(ValueError):
    pass


@dataclass
class Parsed:
    recommendations: RecommendationSet


@dataclass
class Fallback:
    recommendations: RecommendationSet
    reason: str = ""


ExtractionOutcome = Union[Parsed, Fallback]


class RecommendationExtractorAgent:
    """
    Turns a model reply into a RecommendationSet.

    Replies often wrap the JSON in prose, so the outermost brace block is
    salvaged and decoded. Individual records are passed through untouched:
    missing or odd fields are the renderer's problem. If nothing usable is
    found the default recommendations are returned instead; `extract` never
    raises.
    """

    def extract(self, raw_text: Any) -> RecommendationSet:
        return self.parse(raw_text).recommendations

    def parse(self, raw_text: Any) -> ExtractionOutcome:
        try:
            return Parsed(self._decode(raw_text))
        except Exception as e:
            logger.warning("Error parsing recommendations: %s", e)
            return Fallback(
                RecommendationSet(default_recommendations()["recommendations"]),
                reason=str(e),
            )

    def _decode(self, raw_text: Any) -> RecommendationSet:
        if not isinstance(raw_text, str):
            raise ExtractionFailure(f"Expected text, got {type(raw_text).__name__}")

        match = _JSON_BLOCK.search(raw_text)
        if not match:
            raise ExtractionFailure("No valid JSON found in response")

        data = json.loads(match.group(0))
        if not isinstance(data, dict):
            raise ExtractionFailure("JSON payload is not an object")

        recommendations = data.get("recommendations")
        if not isinstance(recommendations, list):
            raise ExtractionFailure("JSON payload has no recommendations list")
        return RecommendationSet(recommendations)


def extract(raw_text: Any) -> RecommendationSet:
    return RecommendationExtractorAgent().extract(raw_text)
