"""
Input validation for the trip value form.

validate_trip() never raises for bad input: it returns a
ValidationOutcome holding either the validated trip or every
field error found, so the caller can show them all at once.
"""

import logging
from collections.abc import Mapping

from pydantic import ValidationError

from trip_models import TRIP_TYPES, FieldError, TripForm, ValidationOutcome
from trip_pay_data import (
    AIRCRAFT_MESSAGE,
    BOOLEAN_MESSAGE,
    FIELD_LABELS,
    INPUT_MESSAGE,
    POSITION_MESSAGE,
    POSITIVE_NUMBER_MESSAGE,
    REQUIRED_MESSAGE,
)

log = logging.getLogger(__name__)

BOOLEAN_FIELDS = ('internationalTrip', 'isRegionalDestination')

# Python attribute name or wire alias -> wire alias
_WIRE_NAMES = {}
for _name, _info in TripForm.model_fields.items():
    _WIRE_NAMES[_name] = _info.alias or _name
    _WIRE_NAMES[_info.alias or _name] = _info.alias or _name


def _message_for(field, error_type):
    label = FIELD_LABELS.get(field, field)
    if error_type == 'missing':
        return REQUIRED_MESSAGE.format(label=label)
    if field == 'position':
        return POSITION_MESSAGE
    if field in BOOLEAN_FIELDS:
        return BOOLEAN_MESSAGE.format(label=label)
    if field == 'aircraft':
        return AIRCRAFT_MESSAGE
    return POSITIVE_NUMBER_MESSAGE.format(label=label)


def _field_errors(exc: ValidationError):
    """One FieldError per field, in form order."""
    errors = []
    seen = set()
    for err in exc.errors():
        loc = err.get('loc') or ()
        if not loc:
            field = 'input'
            message = INPUT_MESSAGE
        else:
            field = _WIRE_NAMES.get(str(loc[0]), str(loc[0]))
            message = _message_for(field, err.get('type'))
        if field in seen:
            continue
        seen.add(field)
        errors.append(FieldError(field=field, message=message))
    return errors


def trip_from_form(form: TripForm):
    """Build the position-specific trip from a validated form.

    Fields that do not belong to the chosen position are dropped;
    unset optional fields fall back to the model defaults.
    """
    trip_cls = TRIP_TYPES[form.position.value]
    data = form.model_dump(mode='json', exclude_none=True)
    return trip_cls(**{k: v for k, v in data.items() if k in trip_cls.model_fields})


def validate_trip(raw) -> ValidationOutcome:
    if not isinstance(raw, Mapping):
        return ValidationOutcome(errors=[FieldError(field='input', message=INPUT_MESSAGE)])

    try:
        form = TripForm.model_validate(dict(raw))
    except ValidationError as e:
        errors = _field_errors(e)
        log.info("Rejected trip input: %s", ", ".join(err.field for err in errors))
        return ValidationOutcome(errors=errors)

    return ValidationOutcome(trip=trip_from_form(form))
