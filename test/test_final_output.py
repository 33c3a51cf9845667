from agents.final_output_agent import SUBTITLE, TITLE, FinalOutputAgent
from agents.recommendation_extractor_agent import extract
from models.recommendation import RecommendationSet


def test_render_default_recommendations():
    text = FinalOutputAgent().render(extract(""))
    assert text.startswith(f"## {TITLE}\n{SUBTITLE}")
    assert "### 1) 🏝️ Bali, Indonesia" in text
    assert "### 2) 🏰 Prague, Czech Republic" in text
    assert "### 3) 🌿 Costa Rica" in text
    assert "- **Cost Range:** $800 - $1,200" in text
    assert "  - Volcano tours" in text


def test_render_tolerates_missing_fields():
    text = FinalOutputAgent().render(RecommendationSet([{"destination": "Oslo"}, "odd"]))
    assert "### 1) Oslo" in text
    assert "### 2) —" in text
    assert "- **Best Time:** —" in text
    assert "_No activities listed._" in text


def test_render_empty_set():
    text = FinalOutputAgent().render(RecommendationSet([]))
    assert "_No recommendations found._" in text
