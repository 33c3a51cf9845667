from datetime import date, datetime

from utils.config import GROQ_API_URL, GROQ_MODEL, TravelConfig
from utils.date_parser import parse_date
from utils.money import clamp, coerce_budget, format_usd


def test_coerce_budget():
    assert coerce_budget("3500", 3000) == 3500
    assert coerce_budget(" 42 ", 3000) == 42
    assert coerce_budget("abc", 3000) == 3000
    assert coerce_budget(float("inf"), 3000) == 3000
    assert coerce_budget(float("nan"), 3000) == 3000
    assert coerce_budget(True, 3000) == 3000


def test_clamp_and_format():
    assert clamp(25, 1, 20) == 20
    assert clamp(0, 1, 20) == 1
    assert format_usd(15000) == "$15,000"


def test_parse_date_formats():
    assert parse_date("2027-03-05") == date(2027, 3, 5)
    assert parse_date("2027/03/05") == date(2027, 3, 5)
    assert parse_date("05.03.2027") == date(2027, 3, 5)
    assert parse_date("05/03/2027") == date(2027, 3, 5)
    assert parse_date("5 March 2027") == date(2027, 3, 5)
    assert parse_date(datetime(2027, 3, 5, 10, 30)) == date(2027, 3, 5)
    assert parse_date(date(2027, 3, 5)) == date(2027, 3, 5)
    assert parse_date("") is None
    assert parse_date(None) is None


def test_config_from_env(monkeypatch):
    monkeypatch.setattr("utils.config.load_dotenv", lambda: None)
    for name in ("GROQ_API_URL", "GROQ_MODEL", "GROQ_TEMPERATURE", "GROQ_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GROQ_API_KEY", "secret")
    monkeypatch.setenv("GROQ_MAX_TOKENS", "not-a-number")

    config = TravelConfig.from_env()
    assert config.api_key == "secret"
    assert config.api_url == GROQ_API_URL
    assert config.model == GROQ_MODEL
    assert config.temperature == 0.7
    assert config.max_tokens == 1000
    assert config.log_level == "INFO"
    assert "secret" not in repr(config)
