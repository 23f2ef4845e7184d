"""Pydantic models for clinic records and API responses.

Records serialize with camelCase keys (patientId, createdAt, ...) so the
JSON contract matches what the browser client expects.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AppointmentStatus(str, Enum):
    """Appointment lifecycle. SCHEDULED -> CANCELLED is the only transition."""
    SCHEDULED = "scheduled"
    CANCELLED = "cancelled"


# Current status -> allowed next statuses
VALID_TRANSITIONS: Dict[AppointmentStatus, List[AppointmentStatus]] = {
    AppointmentStatus.SCHEDULED: [AppointmentStatus.CANCELLED],
    AppointmentStatus.CANCELLED: [],
}


def validate_transition(current: AppointmentStatus, intended: AppointmentStatus) -> bool:
    """
    Validate a status transition.

    Example:
        >>> validate_transition(AppointmentStatus.SCHEDULED, AppointmentStatus.CANCELLED)
        True
        >>> validate_transition(AppointmentStatus.CANCELLED, AppointmentStatus.SCHEDULED)
        False
    """
    return intended in VALID_TRANSITIONS.get(current, [])


class Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys; unset optional fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Doctor(Record):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    name: str
    specialty: str

    def summary(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "specialty": self.specialty}


class Patient(Record):
    id: str
    name: str
    email: str
    phone: str
    created_at: datetime = Field(default_factory=utc_now)

    def summary(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


class Appointment(Record):
    id: str
    patient_id: str
    doctor_id: str
    date: str  # YYYY-MM-DD
    time: str  # HH:MM, one of the catalog slots
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    created_at: datetime = Field(default_factory=utc_now)
    cancelled_at: Optional[datetime] = None

    @property
    def is_scheduled(self) -> bool:
        return self.status == AppointmentStatus.SCHEDULED

    def occupies(self, doctor_id: str, date: str, time: Optional[str] = None) -> bool:
        """True if this appointment holds the slot for doctor/date (and time, if given)."""
        if not self.is_scheduled:
            return False
        if self.doctor_id != doctor_id or self.date != date:
            return False
        return time is None or self.time == time


class FieldError(BaseModel):
    """A single per-field validation failure."""
    field: str
    message: str


class ApiResponse(BaseModel):
    """Envelope shared by every API response."""
    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    errors: Optional[List[FieldError]] = None
    error: Optional[str] = Field(None, description="Internal error detail (development only)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "success": False,
                "message": "Validation failed",
                "errors": [{"field": "email", "message": "Email is not valid"}]
            }
        }
    )
