"""
trip_models.py — Trip Value data models
========================================
Pydantic models shared by the validator, the calculator, the API
and the Streamlit form.

Python attributes are snake_case; the wire format (API bodies, form
payloads) is camelCase via the alias generator.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr
from pydantic.alias_generators import to_camel


class Position(str, Enum):
    SPEAKER = "Speaker"
    GALLEY = "Galley"
    PURSER = "Purser"


# ============================================================
# RAW FORM — what a user submits, before validation
# ============================================================
class TripForm(BaseModel):
    """Flat form schema. `aircraft` and `hours_in_widebody` are always
    optional here, whatever the position."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        extra="ignore",
    )

    international_trip: StrictBool
    seniority_years: float = Field(ge=0)
    tafb: float = Field(ge=0)
    hourly_rate: float = Field(ge=0)
    credit: float = Field(ge=0)
    position: Position
    is_regional_destination: StrictBool
    night_pay_hours: float = Field(ge=0)
    aircraft: Optional[StrictStr] = None
    hours_in_widebody: Optional[float] = Field(default=None, ge=0)


# ============================================================
# VALIDATED TRIP — tagged on position
# ============================================================
class _TripBase(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    international_trip: bool = False
    seniority_years: float = Field(default=0, ge=0)
    tafb: float = Field(default=0, ge=0)
    hourly_rate: float = Field(default=0, ge=0)
    credit: float = Field(default=0, ge=0)
    is_regional_destination: bool = False
    night_pay_hours: float = Field(default=0, ge=0)


class SpeakerTrip(_TripBase):
    position: Literal["Speaker"] = "Speaker"


class GalleyTrip(_TripBase):
    position: Literal["Galley"] = "Galley"
    hours_in_widebody: float = Field(default=0, ge=0)


class PurserTrip(_TripBase):
    position: Literal["Purser"] = "Purser"
    aircraft: Optional[str] = None


TripInput = Annotated[Union[SpeakerTrip, GalleyTrip, PurserTrip], Field(discriminator="position")]

TRIP_TYPES = {
    Position.SPEAKER.value: SpeakerTrip,
    Position.GALLEY.value: GalleyTrip,
    Position.PURSER.value: PurserTrip,
}


# ============================================================
# RESULT
# ============================================================
class TripResult(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    perdiem: float
    perdiem_value: float
    position_credit: float
    international_credit: float
    night_pay_credit: float
    base_value: float
    seniority_factor: int
    total_trip_value: float


# ============================================================
# VALIDATION OUTCOME — value returned instead of raising
# ============================================================
class FieldError(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ValidationOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    trip: Optional[TripInput] = None
    errors: List[FieldError] = []

    @property
    def ok(self) -> bool:
        return self.trip is not None and not self.errors

    def error_map(self) -> dict:
        """Field name -> message, for per-field display."""
        return {e.field: e.message for e in self.errors}
