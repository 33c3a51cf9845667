# models/trip_request.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict


@dataclass(frozen=True)
class TripRequest:
    origin: str
    destination: str
    checkin: date
    checkout: date
    travel_type: str = "solo"
    travelers: int = 1

    @property
    def nights(self) -> int:
        return (self.checkout - self.checkin).days

    def to_session_payload(self) -> Dict[str, Any]:
        return {
            "origin": self.origin,
            "destination": self.destination,
            "checkin": self.checkin.isoformat(),
            "checkout": self.checkout.isoformat(),
            "travelType": self.travel_type,
            "travelers": self.travelers,
        }
