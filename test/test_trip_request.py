from datetime import date

import pytest

from agents.trip_request_agent import REQUIRED_FIELDS_MESSAGE, TripRequestAgent, TripRequestError

TODAY = date(2026, 10, 19)


def valid_form(**overrides):
    form = {
        "origin": "Baku",
        "destination": "Prague, Czech Republic",
        "checkin": "2026-11-02",
        "checkout": "2026-11-09",
        "travel_type": "couple",
        "travelers": "2",
    }
    form.update(overrides)
    return form


def test_valid_request():
    trip = TripRequestAgent(today=TODAY).validate(valid_form())
    assert trip.origin == "Baku"
    assert trip.destination == "Prague, Czech Republic"
    assert trip.checkin == date(2026, 11, 2)
    assert trip.checkout == date(2026, 11, 9)
    assert trip.nights == 7
    assert trip.travelers == 2


def test_session_payload():
    trip = TripRequestAgent(today=TODAY).validate(valid_form(checkin=date(2026, 11, 2)))
    assert trip.to_session_payload() == {
        "origin": "Baku",
        "destination": "Prague, Czech Republic",
        "checkin": "2026-11-02",
        "checkout": "2026-11-09",
        "travelType": "couple",
        "travelers": 2,
    }


@pytest.mark.parametrize("missing", ["origin", "destination", "checkin", "checkout"])
def test_required_fields(missing):
    with pytest.raises(TripRequestError) as exc_info:
        TripRequestAgent(today=TODAY).validate(valid_form(**{missing: ""}))
    assert str(exc_info.value) == REQUIRED_FIELDS_MESSAGE


def test_checkout_before_checkin_rejected():
    with pytest.raises(TripRequestError):
        TripRequestAgent(today=TODAY).validate(valid_form(checkin="2026-11-09", checkout="2026-11-02"))


def test_checkin_in_past_rejected():
    with pytest.raises(TripRequestError):
        TripRequestAgent(today=TODAY).validate(valid_form(checkin="2026-10-01"))


def test_unparseable_date_rejected():
    with pytest.raises(TripRequestError):
        TripRequestAgent(today=TODAY).validate(valid_form(checkout="zzzz"))


@pytest.mark.parametrize("raw, expected", [("0", 1), ("35", 20), ("abc", 1), (None, 1), (5, 5)])
def test_travelers_clamped(raw, expected):
    trip = TripRequestAgent(today=TODAY).validate(valid_form(travelers=raw))
    assert trip.travelers == expected
