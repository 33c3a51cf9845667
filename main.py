# main.py
from __future__ import annotations
import logging

from agents.final_output_agent import FinalOutputAgent
from agents.travel_agent import TravelAgent
from clients.errors import CompletionError
from models.preferences import PreferenceInput
from utils.config import TravelConfig

if __name__ == "__main__":
    config = TravelConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    prefs = PreferenceInput(
        travel_type="couple",
        travel_style="adventure",
        duration="week",
        budget=2500,
        interests=("food", "nature"),
    )

    agent = TravelAgent()
    try:
        recommendations = agent.suggest(prefs)
    except CompletionError as exc:
        print(f"Failed to get recommendations. Please try again. ({exc})")
    else:
        print(FinalOutputAgent().render(recommendations))
