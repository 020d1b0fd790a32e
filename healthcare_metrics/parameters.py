"""Declared parameter sets for catalogued queries, validated with Pydantic."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator

from .exceptions import InvalidParameter


class QueryParams(BaseModel):
    """Base parameter model. Unknown parameter names are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class NoParams(QueryParams):
    """For queries that take no parameters."""
    pass


class CompletedAppointmentsParams(QueryParams):
    status: str = Field("Completed", min_length=1, description="Appointment status to match")
    since: date | None = Field(None, description="Earliest appointment date, inclusive (YYYY-MM-DD)")
    until: date | None = Field(None, description="Latest appointment date, inclusive (YYYY-MM-DD)")

    @field_validator("until")
    @classmethod
    def check_date_range(cls, v: date | None, info: ValidationInfo) -> date | None:
        since = info.data.get("since")
        if v and since and v < since:
            raise ValueError("until must not be earlier than since")
        return v


class DoctorFilterParams(QueryParams):
    specialization: str | None = Field(None, min_length=1, description="Only count doctors with this specialization")


class ContactSuffixParams(QueryParams):
    suffix: str = Field(..., description="Trailing digits of the contact number")

    @field_validator("suffix", mode="before")
    @classmethod
    def normalize_suffix(cls, v):
        """Strip separators; only digits may reach the LIKE pattern.

        The query strips the same separators from the stored number.
        """
        if isinstance(v, int) and not isinstance(v, bool):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError("suffix must be a string of digits")
        v = v.strip().replace("-", "").replace(" ", "")
        if not v.isdigit() or not v.isascii() or len(v) > 15:
            raise ValueError("suffix must be 1-15 digits")
        return v


class MedicationNameParams(QueryParams):
    medication_name: str = Field(..., min_length=1, description="Drug name, matched exactly")

    @field_validator("medication_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


def _type_name(annotation: Any) -> str:
    """Readable name for a field annotation, e.g. 'date | None'."""
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("datetime.", "").replace("NoneType", "None")


def describe_fields(model: type[QueryParams]) -> list[tuple[str, str, bool, Any]]:
    """Return (name, type, required, default) for each declared field."""
    described = []
    for name, info in model.model_fields.items():
        required = info.is_required()
        described.append((name, _type_name(info.annotation), required, None if required else info.default))
    return described


def bind_params(model: type[QueryParams], params: Any) -> dict:
    """Validate caller params and return driver-ready values.

    Dates are rendered as ISO strings to match how the schema stores them.
    """
    if params is None:
        params = {}
    if not isinstance(params, dict):
        try:
            params = dict(params)
        except (TypeError, ValueError):
            raise InvalidParameter("params", "parameters must be a mapping")

    try:
        validated = model.model_validate(params)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"]) or "params"
        raise InvalidParameter(field, error["msg"]) from e

    return validated.model_dump(mode="json")
