"""Input validation for patient and appointment requests.

Pure functions, no storage access. Non-string input fails every predicate.
"""
import re
from datetime import date as date_type, datetime
from typing import Any, Dict, Iterable, List, Optional

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PHONE_PATTERN = re.compile(r'^\d{7,15}$')
DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def validate_name(name: Any) -> bool:
    """Name must be non-empty after trimming whitespace."""
    if not isinstance(name, str):
        return False
    return len(name.strip()) >= 1


def validate_email(email: Any) -> bool:
    """Simple local@domain.tld shape check."""
    if not isinstance(email, str) or not email:
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def validate_phone(phone: Any) -> bool:
    """7-15 digits once spaces and dashes are removed."""
    if not isinstance(phone, str) or not phone:
        return False
    digits = re.sub(r'[\s-]', '', phone)
    return PHONE_PATTERN.match(digits) is not None


def validate_date(value: Any, today: Optional[date_type] = None) -> bool:
    """
    Check a YYYY-MM-DD date that is today or later.

    Args:
        value: Date string
        today: Reference day, defaults to the server-local current date

    Returns:
        True if the date is well-formed, exists, and is not in the past
    """
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return False

    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return False

    return parsed >= (today or date_type.today())


def validate_time(time: Any, valid_slots: Iterable[str]) -> bool:
    """Time must be one of the supplied catalog slots."""
    if not isinstance(time, str) or not time:
        return False
    return time in valid_slots


def _is_present(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def validate_patient_payload(data: Dict[str, Any]) -> List[Dict[str, str]]:
    """Collect field errors for a patient registration body."""
    errors = []

    if not validate_name(data.get("name")):
        errors.append({"field": "name", "message": "Name is required"})

    if not validate_email(data.get("email")):
        errors.append({"field": "email", "message": "Email is not valid"})

    if not validate_phone(data.get("phone")):
        errors.append({"field": "phone", "message": "Phone must have between 7 and 15 digits"})

    return errors


def validate_appointment_payload(
    data: Dict[str, Any],
    today: Optional[date_type] = None
) -> List[Dict[str, str]]:
    """
    Collect field errors for a booking body.

    Only the presence of `time` is checked here; catalog membership is
    checked by the ledger after patient and doctor lookups.
    """
    errors = []

    if not _is_present(data.get("patientId")):
        errors.append({"field": "patientId", "message": "Patient ID is required"})

    if not _is_present(data.get("doctorId")):
        errors.append({"field": "doctorId", "message": "Doctor ID is required"})

    if not validate_date(data.get("date"), today=today):
        errors.append({"field": "date", "message": "Date is invalid or earlier than today"})

    if not _is_present(data.get("time")):
        errors.append({"field": "time", "message": "Time is required"})

    return errors
