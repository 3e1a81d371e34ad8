"""Candidate domain model"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any

from .status import StatusField


@dataclass
class Candidate:
    """Program applicant (domain model)

    Descriptive fields are owned by the remote service. Only the four status
    fields change on the client, and only through the toggle controller.
    """

    id: Any
    full_name: str = field(default="")
    contact_number: str = field(default="")
    email_id: str = field(default="")
    name_of_college: str = field(default="")
    stream: str = field(default="")
    date_of_application: date | str | None = field(default=None)
    # Kept as received; "2023" and 2023 are distinct histogram keys
    year_of_completion: str | int | None = field(default=None)
    batch: str | None = field(default=None)
    whatsapp_msg: str | None = field(default=None)
    phone_enquiry: str | None = field(default=None)
    online: str | None = field(default=None)
    program: str | None = field(default=None)

    def status(self, status_field: StatusField) -> str | None:
        """Current value of one status field"""
        return getattr(self, status_field.attribute)

    def set_status(self, status_field: StatusField, value: str | None) -> None:
        setattr(self, status_field.attribute, value)
