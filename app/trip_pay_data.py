"""
Flight Attendant Trip Pay — Pay Table Configuration
====================================================
This file contains ALL the numbers used by the trip value calculation.

TO CHANGE A RATE:
1. Edit the value in this file
2. Update the matching test in tests/test_trip_calculator.py
3. Deploy

The calculator (trip_calculator.py) contains only the formula; every
rate, multiplier and label lives here.
"""

# ============================================================
# CALCULATOR IDENTITY
# ============================================================
APP_TITLE = "United Flight Attendant Trip Calculator"
APP_VERSION = "1.0.0"

# ============================================================
# PER DIEM — hourly rate for time away from base
# ============================================================
PER_DIEM_BASE_DOMESTIC = 2.20
PER_DIEM_BASE_INTERNATIONAL = 2.70
PER_DIEM_SENIORITY_STEP = 0.05   # added per completed seniority step
SENIORITY_YEARS_PER_STEP = 2     # one step every 2 years

# ============================================================
# CREDIT MULTIPLIERS
# ============================================================
INTERNATIONAL_CREDIT_MULTIPLIER = 2
SPEAKER_CREDIT_MULTIPLIER = 2.5
NIGHT_PAY_DIVISOR = 2

# ============================================================
# POSITIONS
# ============================================================
POSITIONS = ['Speaker', 'Galley', 'Purser']
DEFAULT_POSITION = 'Speaker'

# ============================================================
# FLEET — Aircraft types a Purser can work
# ============================================================
AIRCRAFT_OPTIONS = [
    {'value': 'A319', 'label': 'A319'},
    {'value': 'A320', 'label': 'A320'},
    {'value': 'B737', 'label': 'B737'},
    {'value': 'B737-800', 'label': 'B737-800'},
    {'value': 'B737-900', 'label': 'B737-900'},
    {'value': 'B757', 'label': 'B757'},
    {'value': 'widebody', 'label': 'Widebody'},
]

# Purser credit multipliers by aircraft group.
# Each entry: (aircraft in group, regional multiplier, non-regional multiplier)
PURSER_AIRCRAFT_GROUPS = [
    (('A319', 'A320', 'B737'), 2, 1),
    (('B737-800', 'B737-900', 'B757'), 3, 2),
    (('widebody',), 4, 3),
]

# ============================================================
# REGIONAL DESTINATIONS — higher Purser multiplier
# ============================================================
REGIONAL_DESTINATIONS = ['Mexico', 'Caribbean', 'Central America', 'Alaska', 'Hawaii']

# ============================================================
# FORM — wire field names, labels and defaults
# ============================================================
FIELD_LABELS = {
    'internationalTrip': 'International trip',
    'seniorityYears': 'Seniority years',
    'tafb': 'TAFB',
    'hourlyRate': 'Hourly rate',
    'credit': 'Credit hours',
    'position': 'Position',
    'isRegionalDestination': 'Regional destination',
    'nightPayHours': 'Night pay hours',
    'aircraft': 'Aircraft',
    'hoursInWidebody': 'Hours in widebody',
}

FORM_DEFAULTS = {
    'internationalTrip': False,
    'seniorityYears': 0,
    'tafb': 0,
    'hourlyRate': 0,
    'credit': 0,
    'position': DEFAULT_POSITION,
    'isRegionalDestination': False,
    'hoursInWidebody': 0,
    'nightPayHours': 0,
}

# Optional inputs that only apply to one position
POSITION_INPUT_GROUPS = {
    'Purser': ('aircraft', 'isRegionalDestination'),
    'Galley': ('hoursInWidebody',),
    'Speaker': (),
}

# ============================================================
# MESSAGES
# ============================================================
POSITIVE_NUMBER_MESSAGE = "{label} must be a positive number"
BOOLEAN_MESSAGE = "{label} must be true or false"
REQUIRED_MESSAGE = "{label} is required"
POSITION_MESSAGE = "Position must be one of " + ", ".join(POSITIONS)
AIRCRAFT_MESSAGE = "Aircraft must be text"
INPUT_MESSAGE = "Trip details must be an object"
