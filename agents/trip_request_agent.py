# agents/trip_request_agent.py
from __future__ import annotations
from datetime import date
from typing import Any, Dict, Optional

from models.trip_request import TripRequest
from utils.config import MAX_TRAVELERS
from utils.date_parser import parse_date
from utils.money import clamp

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields."


class TripRequestError(ValueError):
    pass


class TripRequestAgent:
    """
    Validates the specific-destination form before it is handed to the itinerary page.
    """

    def __init__(self, today: Optional[date] = None):
        self._today = today

    @property
    def today(self) -> date:
        return self._today or date.today()

    def validate(self, raw: Dict[str, Any]) -> TripRequest:
        origin = str(raw.get("origin") or "").strip()
        destination = str(raw.get("destination") or "").strip()
        checkin_raw = raw.get("checkin")
        checkout_raw = raw.get("checkout")

        if not origin or not destination or not checkin_raw or not checkout_raw:
            raise TripRequestError(REQUIRED_FIELDS_MESSAGE)

        checkin = parse_date(checkin_raw)
        checkout = parse_date(checkout_raw)
        if checkin is None or checkout is None:
            raise TripRequestError("Please enter valid check-in and check-out dates.")

        if checkin < self.today:
            raise TripRequestError("Check-in date can't be in the past.")
        if checkout < checkin:
            raise TripRequestError("Check-out date must be on or after the check-in date.")

        return TripRequest(
            origin=origin,
            destination=destination,
            checkin=checkin,
            checkout=checkout,
            travel_type=str(raw.get("travel_type") or raw.get("travelType") or "solo").strip() or "solo",
            travelers=self._travelers(raw.get("travelers")),
        )

    def _travelers(self, value: Any) -> int:
        try:
            count = int(str(value).strip())
        except (TypeError, ValueError):
            return 1
        return clamp(count, 1, MAX_TRAVELERS)
