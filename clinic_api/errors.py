"""Error kinds raised by the registry, ledger and request handlers.

Each exception carries the HTTP status it maps to; the Flask error handler
in api.py renders them into the standard response envelope.
"""
from typing import Dict, List, Optional


class ClinicError(Exception):
    """Base class for expected, user-facing failures."""
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors


class InputValidationError(ClinicError):
    """Raised when request fields are malformed or missing."""
    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, errors: List[Dict[str, str]], message: str = "Validation failed"):
        super().__init__(message, errors=errors)


class InvalidSlotError(InputValidationError):
    """Raised when a requested time is not part of the slot catalog."""

    def __init__(self, time: str):
        super().__init__(
            errors=[{"field": "time", "message": f"'{time}' is not a valid time slot"}],
            message="Invalid time slot",
        )
        self.time = time


class NotFoundError(ClinicError):
    status_code = 404
    code = "NOT_FOUND"


class PatientNotFoundError(NotFoundError):
    def __init__(self, patient_id: str):
        super().__init__(f"Patient '{patient_id}' not found")
        self.patient_id = patient_id


class DoctorNotFoundError(NotFoundError):
    def __init__(self, doctor_id: str):
        super().__init__(f"Doctor '{doctor_id}' not found")
        self.doctor_id = doctor_id


class AppointmentNotFoundError(NotFoundError):
    def __init__(self, appointment_id: str):
        super().__init__(f"Appointment '{appointment_id}' not found")
        self.appointment_id = appointment_id


class ConflictError(ClinicError):
    status_code = 409
    code = "CONFLICT"


class DuplicateEmailError(ConflictError):
    """Raised when a patient with the same normalized email exists."""

    def __init__(self, email: str):
        super().__init__(f"A patient is already registered with email '{email}'")
        self.email = email


class SlotUnavailableError(ConflictError):
    """Raised when the doctor/date/time triple already has a scheduled appointment."""

    def __init__(self, doctor_id: str, date: str, time: str):
        super().__init__(f"Slot {date} {time} is already booked for doctor '{doctor_id}'")
        self.doctor_id = doctor_id
        self.date = date
        self.time = time


class InvalidStateError(ClinicError):
    status_code = 400
    code = "INVALID_STATE"


class AlreadyCancelledError(InvalidStateError):
    def __init__(self, appointment_id: str):
        super().__init__(f"Appointment {appointment_id} is already cancelled")
        self.appointment_id = appointment_id
