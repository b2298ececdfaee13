import streamlit as st
import sys
from pathlib import Path

# Add app directory to path
sys.path.append(str(Path(__file__).parent))

from trip_calculator import calculate_trip_value
from trip_display import active_input_group, aircraft_label, breakdown_rows, format_money
from trip_pay_data import (
    AIRCRAFT_OPTIONS,
    APP_TITLE,
    FIELD_LABELS,
    FORM_DEFAULTS,
    POSITIONS,
    REGIONAL_DESTINATIONS,
)
from trip_validation import validate_trip


# Page config
st.set_page_config(
    page_title="Trip Calculator",
    page_icon="✈️",
    layout="wide"
)

# ============================================================
# SESSION STATE — last result only, never persisted
# ============================================================
if 'result' not in st.session_state:
    st.session_state.result = None
if 'result_international' not in st.session_state:
    st.session_state.result_international = False
if 'errors' not in st.session_state:
    st.session_state.errors = {}


def field_error(field):
    """Show the validation message for one field, under its input."""
    message = st.session_state.errors.get(field)
    if message:
        st.error(message)


st.title(f"✈️ {APP_TITLE}")

left, right = st.columns(2)

# ============================================================
# TRIP DETAILS
# ============================================================
with left:
    st.subheader("Trip Details")
    st.caption("Enter your trip information to calculate the total value.")

    international_trip = st.toggle(
        "International Trip",
        value=FORM_DEFAULTS['internationalTrip'],
        help="Is this an international trip?",
    )

    col_a, col_b = st.columns(2)
    with col_a:
        seniority_years = st.number_input(
            "Seniority Years", value=float(FORM_DEFAULTS['seniorityYears']), step=1.0
        )
        field_error('seniorityYears')
        hourly_rate = st.number_input(
            "Hourly Rate ($)", value=float(FORM_DEFAULTS['hourlyRate']), step=1.0
        )
        field_error('hourlyRate')
    with col_b:
        tafb = st.number_input(
            "TAFB (hours)", value=float(FORM_DEFAULTS['tafb']), step=1.0
        )
        field_error('tafb')
        credit = st.number_input(
            "Credit (hours)", value=float(FORM_DEFAULTS['credit']), step=1.0
        )
        field_error('credit')

    position = st.selectbox(
        FIELD_LABELS['position'],
        options=POSITIONS,
        index=POSITIONS.index(FORM_DEFAULTS['position']),
    )
    field_error('position')

    # Optional inputs follow the selected position
    shown = active_input_group(position)
    aircraft = None
    is_regional_destination = FORM_DEFAULTS['isRegionalDestination']
    hours_in_widebody = None

    if 'aircraft' in shown:
        aircraft = st.selectbox(
            "Aircraft",
            options=[a['value'] for a in AIRCRAFT_OPTIONS],
            index=None,
            format_func=aircraft_label,
            placeholder="Select aircraft",
        )
        field_error('aircraft')
    if 'isRegionalDestination' in shown:
        is_regional_destination = st.toggle(
            " / ".join(REGIONAL_DESTINATIONS),
            value=FORM_DEFAULTS['isRegionalDestination'],
            help="Is this trip to one of these destinations?",
        )
    if 'hoursInWidebody' in shown:
        hours_in_widebody = st.number_input(
            "Hours in Widebody", value=float(FORM_DEFAULTS['hoursInWidebody']), step=1.0
        )
        field_error('hoursInWidebody')

    night_pay_hours = st.number_input(
        "Night Pay Hours", value=float(FORM_DEFAULTS['nightPayHours']), step=1.0
    )
    field_error('nightPayHours')

    if st.button("Calculate Trip Value", type="primary", use_container_width=True):
        raw = {
            'internationalTrip': international_trip,
            'seniorityYears': seniority_years,
            'tafb': tafb,
            'hourlyRate': hourly_rate,
            'credit': credit,
            'position': position,
            'isRegionalDestination': is_regional_destination,
            'nightPayHours': night_pay_hours,
            'aircraft': aircraft,
            'hoursInWidebody': hours_in_widebody,
        }
        outcome = validate_trip(raw)
        if outcome.ok:
            st.session_state.result = calculate_trip_value(outcome.trip)
            st.session_state.result_international = outcome.trip.international_trip
            st.session_state.errors = {}
        else:
            st.session_state.result = None
            st.session_state.errors = outcome.error_map()
        st.rerun()

    field_error('input')

# ============================================================
# RESULTS
# ============================================================
with right:
    st.subheader("Trip Value Results")
    st.caption("Breakdown of your trip value calculation.")

    result = st.session_state.result
    if result is not None:
        with st.container(border=True):
            st.metric("Total Trip Value", format_money(result.total_trip_value))

        st.write("---")
        st.markdown("**Calculation Breakdown**")
        for label, value in breakdown_rows(result, st.session_state.result_international):
            row_label, row_value = st.columns(2)
            row_label.write(f"{label}:")
            # Escape $ so Streamlit does not render it as LaTeX
            row_value.write(value.replace("$", "\\$"))
    else:
        st.info("✈️ **No Calculation Yet** — Fill out the trip details form and click calculate to see your trip value.")
