from __future__ import annotations

import logging
from datetime import date

import streamlit as st

from agents.final_output_agent import SUBTITLE, TITLE, FinalOutputAgent
from agents.travel_agent import TravelAgent
from agents.trip_request_agent import TripRequestAgent, TripRequestError
from clients.completion_client import CompletionClient
from clients.errors import CompletionError
from models.preferences import DEFAULT_BUDGET
from models.recommendation import RecommendationSet
from utils.config import (
    ITINERARY_SESSION_KEY,
    MAX_BUDGET,
    MAX_TRAVELERS,
    MIN_BUDGET,
    TravelConfig,
)
from utils.money import format_usd

logger = logging.getLogger(__name__)

FAILED_MESSAGE = "Failed to get recommendations. Please try again."

MODES = {"specific": "🎯 I know where I'm going", "suggest": "💡 Suggest destinations"}
TRAVEL_TYPES = ["solo", "couple", "family", "group"]
TRAVEL_STYLES = ["relaxation", "adventure", "culture", "luxury", "budget"]
DURATIONS = ["weekend", "week", "two-weeks", "month"]
INTERESTS = [
    "beaches",
    "mountains",
    "history",
    "food",
    "nightlife",
    "nature",
    "shopping",
    "art",
]

APP_STYLE = """
<style>
.hero {
  background: linear-gradient(135deg, rgba(102,126,234,0.18), rgba(240,147,251,0.14));
  border: 1px solid rgba(102,126,234,0.12);
  padding: 1.25rem 1.5rem;
  border-radius: 14px;
  margin-bottom: 1rem;
}
.hero h1 {
  margin: 0;
}
.hero p {
  margin: 0.25rem 0 0;
  color: #636e72;
}
</style>
"""


@st.cache_resource
def get_config() -> TravelConfig:
    config = TravelConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return config


@st.cache_resource
def get_agent() -> TravelAgent:
    return TravelAgent(client=CompletionClient(get_config()))


def notify(kind: str, message: str) -> None:
    st.session_state.notice = (kind, message)


def show_notice() -> None:
    notice = st.session_state.pop("notice", None)
    if not notice:
        return
    kind, message = notice
    if kind == "success":
        st.success(message, icon="✅")
    else:
        st.error(message, icon="❌")


def request_suggestions() -> None:
    st.session_state.pending_prefs = {
        "travel_type": st.session_state.get("travel_type_suggest"),
        "travel_style": st.session_state.get("travel_style"),
        "duration": st.session_state.get("duration"),
        "budget": st.session_state.get("budget"),
        "interests": st.session_state.get("interests") or [],
    }


def select_destination(index: int) -> None:
    recommendations: RecommendationSet = st.session_state.recommendations
    selected = recommendations.selection(index)
    st.session_state.mode = "specific"
    st.session_state.destination = selected["destination"]
    notify(
        "success",
        f"Great choice! {selected['destination']} has been selected. Please fill in the remaining details.",
    )


def run_pending_request() -> None:
    prefs = st.session_state.get("pending_prefs")
    if prefs is None:
        return
    try:
        with st.spinner("🔄 Getting Recommendations..."):
            st.session_state.recommendations = get_agent().suggest(prefs)
    except (CompletionError, ValueError) as exc:
        logger.error("Error getting recommendations: %s", exc)
        notify("error", FAILED_MESSAGE)
    finally:
        st.session_state.pending_prefs = None
    st.rerun()


def suggestion_form() -> None:
    pending = st.session_state.get("pending_prefs") is not None
    with st.form("suggest-form"):
        st.radio("Who's travelling?", TRAVEL_TYPES, horizontal=True, key="travel_type_suggest")
        st.selectbox("Travel style", TRAVEL_STYLES, key="travel_style")
        st.selectbox("Trip length", DURATIONS, index=DURATIONS.index("week"), key="duration")
        st.slider(
            "Budget per person ($)",
            min_value=MIN_BUDGET,
            max_value=MAX_BUDGET,
            value=DEFAULT_BUDGET,
            step=100,
            key="budget",
        )
        st.caption(f"{format_usd(st.session_state.get('budget', DEFAULT_BUDGET))} per person")
        st.multiselect("Interests", INTERESTS, key="interests")
        st.form_submit_button(
            "🔄 Getting Recommendations..." if pending else "Get Personalized Suggestions",
            disabled=pending,
            on_click=request_suggestions,
        )
    run_pending_request()

    recommendations = st.session_state.get("recommendations")
    if recommendations is not None:
        show_recommendations(recommendations)


def show_recommendations(recommendations: RecommendationSet) -> None:
    st.markdown(f"## {TITLE}")
    st.caption(SUBTITLE)
    output = FinalOutputAgent()
    cards = output.cards(recommendations)
    if not cards:
        st.info("No recommendations found.")
        return
    columns = st.columns(len(cards))
    for idx, (column, rec) in enumerate(zip(columns, cards)):
        with column, st.container(border=True):
            st.markdown(output.render_card(idx + 1, rec))
            st.button(
                "Select This Destination",
                key=f"select-{idx}",
                on_click=select_destination,
                args=(idx,),
                use_container_width=True,
            )


def specific_form() -> None:
    today = date.today()
    with st.form("specific-form"):
        st.text_input("From", key="origin")
        st.text_input("To", key="destination")
        checkin = st.date_input("Check-in", value=None, min_value=today, key="checkin")
        st.date_input("Check-out", value=None, min_value=checkin or today, key="checkout")
        st.radio("Who's travelling?", TRAVEL_TYPES, horizontal=True, key="travel_type")
        st.number_input("Travelers", min_value=1, max_value=MAX_TRAVELERS, value=1, step=1, key="travelers")
        submitted = st.form_submit_button("Plan My Trip")

    if submitted:
        try:
            trip = TripRequestAgent(today=today).validate(
                {
                    "origin": st.session_state.get("origin"),
                    "destination": st.session_state.get("destination"),
                    "checkin": st.session_state.get("checkin"),
                    "checkout": st.session_state.get("checkout"),
                    "travel_type": st.session_state.get("travel_type"),
                    "travelers": st.session_state.get("travelers"),
                }
            )
        except TripRequestError as exc:
            st.error(str(exc), icon="❌")
            return
        st.session_state[ITINERARY_SESSION_KEY] = trip.to_session_payload()
        st.success("Preparing your itinerary...", icon="✅")
        st.caption(f"{trip.nights} night(s) in {trip.destination} for {trip.travelers} traveler(s)")

    if ITINERARY_SESSION_KEY in st.session_state:
        st.json(st.session_state[ITINERARY_SESSION_KEY])


st.set_page_config(page_title="Travel Planner", page_icon="✈️")
get_config()
st.markdown(APP_STYLE, unsafe_allow_html=True)
st.markdown(
    """
    <div class="hero">
      <h1>Where to next?</h1>
      <p>Plan a trip you already have in mind, or tell us what you like and get three tailored destination ideas.</p>
    </div>
    """,
    unsafe_allow_html=True,
)

if "mode" not in st.session_state:
    st.session_state.mode = "specific"

st.radio("Mode", list(MODES), format_func=MODES.get, horizontal=True, key="mode", label_visibility="collapsed")
show_notice()

if st.session_state.mode == "specific":
    specific_form()
else:
    suggestion_form()
