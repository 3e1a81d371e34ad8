"""Pydantic models for the remote data service payloads

This module validates the candidate roster returned by the service and the
request bodies sent for status updates and reminder dispatch. Field names
follow the service's camelCase wire format.
"""

from datetime import date, datetime
from typing import Any, Literal

from loguru import logger
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from roster.domain.models import Candidate, StatusField


def _parse_application_date(value: Any) -> Any:
    """Parse ISO dates/datetimes; anything else is kept as received"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            return text
    return value or None


class CandidatePayload(BaseModel):
    """One candidate record as served by GET /api/candidates"""

    model_config = ConfigDict(extra="ignore")

    id: Any = Field(..., description="Opaque identifier assigned by the service")
    fullName: str = Field("", description="Candidate name")
    contactNumber: str = Field("", description="Phone number")
    emailId: str = Field("", description="Email address")
    nameOfCollege: str = Field("", description="College")
    stream: str = Field("", description="Field of study")
    dateOfApplication: date | str | None = Field(
        None, description="Application date"
    )
    yearOfCompletion: str | int | None = Field(
        None, description="Graduation year, kept exactly as received"
    )
    batch: str | None = Field(None, description="Cohort label")
    whatsappMsg: str | None = Field(None, description="sent / pending")
    phoneEnquiry: str | None = Field(None, description="done / not done")
    online: str | None = Field(None, description="attended / absent")
    program: str | None = Field(None, description="attended / ghosted")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        """Validate the identifier is present"""
        if v is None or v == "":
            raise ValueError("Candidate id is required")
        return v

    @field_validator(
        "fullName",
        "contactNumber",
        "emailId",
        "nameOfCollege",
        "stream",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, v):
        """Spreadsheet cells may arrive as numbers or null"""
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator(
        "batch", "whatsappMsg", "phoneEnquiry", "online", "program", mode="before"
    )
    @classmethod
    def coerce_optional_text(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("dateOfApplication", mode="before")
    @classmethod
    def parse_date(cls, v):
        return _parse_application_date(v)

    def to_domain(self) -> Candidate:
        """Convert to the domain model"""
        return Candidate(
            id=self.id,
            full_name=self.fullName,
            contact_number=self.contactNumber,
            email_id=self.emailId,
            name_of_college=self.nameOfCollege,
            stream=self.stream,
            date_of_application=self.dateOfApplication,
            year_of_completion=self.yearOfCompletion,
            batch=self.batch,
            whatsapp_msg=self.whatsappMsg,
            phone_enquiry=self.phoneEnquiry,
            online=self.online,
            program=self.program,
        )


class UpdateCandidateRequest(BaseModel):
    """Body of POST /api/update-candidate"""

    id: Any = Field(..., description="Candidate identifier")
    field: Literal["whatsappMsg", "phoneEnquiry", "online", "program"] = Field(
        ..., description="Status field wire name"
    )
    value: str = Field(..., min_length=1, description="New status value")

    @model_validator(mode="after")
    def validate_value_for_field(self):
        """Validate the value belongs to the field's two-value cycle"""
        status_field = StatusField.from_wire(self.field)
        if self.value not in status_field.values:
            raise ValueError(
                f"Invalid value {self.value!r} for {self.field} "
                f"(expected one of {', '.join(status_field.values)})"
            )
        return self


class SendRemindersRequest(BaseModel):
    """Body of POST /api/send-reminders"""

    days: int = Field(..., gt=0, description="Days before the program starts")
    batch: str = Field(..., min_length=1, description="Batch label")

    @field_validator("days", mode="before")
    @classmethod
    def validate_days(cls, v):
        """Reject booleans, which would otherwise pass as 0/1"""
        if isinstance(v, bool):
            raise ValueError("days must be an integer")
        return v


def parse_candidates(payload: Any) -> list[Candidate]:
    """Validate a roster payload and convert it to domain candidates

    Records that fail validation (not an object, missing id, unusable
    field types) are logged and skipped; the rest load normally.

    Args:
        payload: Decoded JSON body of GET /api/candidates

    Returns:
        Valid candidates in payload order

    Raises:
        ValueError: If the payload is not a JSON array
    """
    if not isinstance(payload, list):
        raise ValueError(
            f"Expected a JSON array of candidates, got {type(payload).__name__}"
        )
    candidates = []
    for index, item in enumerate(payload):
        try:
            candidates.append(CandidatePayload.model_validate(item).to_domain())
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid candidate record at index {index}: "
                f"{e.error_count()} error(s), first: {e.errors()[0]['msg']}"
            )
    return candidates
