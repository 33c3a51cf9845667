# agents/travel_agent.py
from __future__ import annotations
import logging
from typing import Any, Optional

from agents.prompt_builder_agent import PromptBuilderAgent
from agents.recommendation_extractor_agent import (
    ExtractionOutcome,
    Fallback,
    RecommendationExtractorAgent,
)
from agents.travel_preferences_agent import TravelPreferencesAgent
from clients.completion_client import CompletionClient
from models.recommendation import RecommendationSet

logger = logging.getLogger(__name__)


class TravelAgent:
    """
    Orchestrator: preferences -> prompt -> completion -> recommendations.
    Completion errors propagate to the caller; extraction never fails.
    """

    def __init__(self, client: Optional[CompletionClient] = None):
        self.pref_agent = TravelPreferencesAgent()
        self.prompt_agent = PromptBuilderAgent()
        self.extractor = RecommendationExtractorAgent()
        self.client = client or CompletionClient()

    def suggest(self, raw_prefs: Any) -> RecommendationSet:
        return self.suggest_outcome(raw_prefs).recommendations

    def suggest_outcome(self, raw_prefs: Any) -> ExtractionOutcome:
        prefs = self.pref_agent.normalize(raw_prefs)
        prompt = self.prompt_agent.build(prefs)
        content = self.client.complete(prompt)

        outcome = self.extractor.parse(content)
        if isinstance(outcome, Fallback):
            logger.info("Showing default recommendations (%s)", outcome.reason)
        return outcome
