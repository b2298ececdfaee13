"""
Trip value calculator.

Pure functions: a validated trip goes in, a TripResult comes out.
No rounding happens here; formatting to cents is a display concern
(see trip_display.py).
"""

import logging
import math

from trip_models import GalleyTrip, PurserTrip, SpeakerTrip, TripResult
from trip_pay_data import (
    INTERNATIONAL_CREDIT_MULTIPLIER,
    NIGHT_PAY_DIVISOR,
    PER_DIEM_BASE_DOMESTIC,
    PER_DIEM_BASE_INTERNATIONAL,
    PER_DIEM_SENIORITY_STEP,
    PURSER_AIRCRAFT_GROUPS,
    SENIORITY_YEARS_PER_STEP,
    SPEAKER_CREDIT_MULTIPLIER,
)

log = logging.getLogger(__name__)


def seniority_factor(seniority_years: float) -> int:
    return int(math.floor(seniority_years / SENIORITY_YEARS_PER_STEP))


def perdiem_rate(international_trip: bool, seniority_years: float) -> float:
    """Hourly per diem: base rate plus 0.05 for every 2 years of seniority."""
    base = PER_DIEM_BASE_INTERNATIONAL if international_trip else PER_DIEM_BASE_DOMESTIC
    return base + seniority_factor(seniority_years) * PER_DIEM_SENIORITY_STEP


def purser_multiplier(aircraft, is_regional_destination: bool):
    """Credit multiplier for a Purser; 0 when the aircraft is unset or unknown."""
    for group, regional, non_regional in PURSER_AIRCRAFT_GROUPS:
        if aircraft in group:
            return regional if is_regional_destination else non_regional
    return 0


def position_credit(trip) -> float:
    if isinstance(trip, PurserTrip):
        return trip.credit * purser_multiplier(trip.aircraft, trip.is_regional_destination)
    if isinstance(trip, GalleyTrip):
        # Widebody hours only; credit, region and aircraft do not apply
        return trip.hours_in_widebody or 0
    if isinstance(trip, SpeakerTrip):
        return trip.credit * SPEAKER_CREDIT_MULTIPLIER
    return 0


def calculate_trip_value(trip) -> TripResult:
    factor = seniority_factor(trip.seniority_years)
    perdiem = perdiem_rate(trip.international_trip, trip.seniority_years)
    perdiem_value = perdiem * trip.tafb

    international_credit = trip.credit * INTERNATIONAL_CREDIT_MULTIPLIER if trip.international_trip else 0
    pos_credit = position_credit(trip)
    night_pay_credit = trip.night_pay_hours / NIGHT_PAY_DIVISOR
    base_value = trip.hourly_rate * trip.credit

    total = base_value + perdiem_value + pos_credit + international_credit + night_pay_credit

    log.debug("Trip value for %s: %.2f", trip.position, total)

    return TripResult(
        perdiem=perdiem,
        perdiem_value=perdiem_value,
        position_credit=pos_credit,
        international_credit=international_credit,
        night_pay_credit=night_pay_credit,
        base_value=base_value,
        seniority_factor=factor,
        total_trip_value=total,
    )
