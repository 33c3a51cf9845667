# agents/final_output_agent.py
from __future__ import annotations
from typing import List

from models.recommendation import Recommendation, RecommendationSet

TITLE = "✨ Your Personalized Recommendations"
SUBTITLE = "Based on your preferences, here are our top 3 destination suggestions:"


class FinalOutputAgent:
    def cards(self, recommendations: RecommendationSet) -> List[Recommendation]:
        return recommendations.cards()

    def render_card(self, index: int, rec: Recommendation) -> str:
        lines: List[str] = []
        heading = " ".join(part for part in (rec.emoji, rec.destination or "—") if part)
        lines.append(f"### {index}) {heading}")
        if rec.description:
            lines.append(rec.description)
        lines.append("")
        lines.append(f"- **Why this matches:** {rec.why_match or '—'}")
        lines.append(f"- **Cost Range:** {rec.cost_range or '—'}")
        lines.append(f"- **Best Time:** {rec.best_time or '—'}")
        lines.append("- **Top Activities:**")
        if not rec.activities:
            lines.append("  - _No activities listed._")
        else:
            for activity in rec.activities:
                lines.append(f"  - {activity}")
        return "\n".join(lines)

    def render(self, recommendations: RecommendationSet) -> str:
        lines: List[str] = [f"## {TITLE}", SUBTITLE, ""]
        cards = self.cards(recommendations)
        if not cards:
            lines.append("- _No recommendations found._")
        for idx, rec in enumerate(cards, start=1):
            lines.append(self.render_card(idx, rec))
            lines.append("")
        return "\n".join(lines).rstrip()
