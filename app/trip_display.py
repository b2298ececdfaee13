"""
Display helpers shared by the Streamlit form and the API.
Rounding to cents happens here and nowhere else.
"""

from trip_pay_data import AIRCRAFT_OPTIONS, POSITION_INPUT_GROUPS


def format_money(value):
    return f"${value:,.2f}"


def aircraft_label(value):
    for option in AIRCRAFT_OPTIONS:
        if option['value'] == value:
            return option['label']
    return value or ""


def active_input_group(position):
    """Optional inputs shown for a position. Derived from the position, never stored."""
    position = getattr(position, 'value', position)
    return POSITION_INPUT_GROUPS.get(position, ())


def breakdown_rows(result, international_trip):
    """Rows for the 'Calculation Breakdown' panel, as (label, text)."""
    rows = [
        ("Per Diem Rate", f"{format_money(result.perdiem)}/hr"),
        ("Per Diem Value", format_money(result.perdiem_value)),
    ]
    if international_trip:
        rows.append(("International Credit", format_money(result.international_credit)))
    rows.append(("Position Credit", format_money(result.position_credit)))
    rows.append(("Night Pay Credit", format_money(result.night_pay_credit)))
    return rows
