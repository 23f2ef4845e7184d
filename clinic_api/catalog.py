"""Catalog of doctors and bookable time slots.

Both are fixed at construction and never mutated afterwards; every doctor
offers the same slots on every date.
"""
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional

from clinic_api import config
from clinic_api.models import Doctor
from clinic_api.validators import validate_time


def generate_time_slots(operating_hours: Dict[str, Any]) -> List[str]:
    """Generate the daily slot list from operating hours.

    Args:
        operating_hours: Mapping with start_time, end_time,
            slot_duration_minutes and an optional lunch_break {start, end}

    Returns:
        Ordered "HH:MM" strings, lunch break excluded

    Example:
        >>> generate_time_slots({"start_time": "09:00", "end_time": "10:00",
        ...                      "slot_duration_minutes": 30})
        ['09:00', '09:30']
    """
    start_time = datetime.strptime(operating_hours["start_time"], "%H:%M")
    end_time = datetime.strptime(operating_hours["end_time"], "%H:%M")
    step = timedelta(minutes=operating_hours["slot_duration_minutes"])

    lunch = operating_hours.get("lunch_break") or {}
    lunch_start = datetime.strptime(lunch["start"], "%H:%M") if lunch else None
    lunch_end = datetime.strptime(lunch["end"], "%H:%M") if lunch else None

    slots = []
    current_time = start_time
    while current_time < end_time:
        in_lunch = lunch_start is not None and lunch_start <= current_time < lunch_end
        if not in_lunch:
            slots.append(current_time.strftime("%H:%M"))
        current_time += step

    return slots


class Catalog:
    """Read-only doctors and slot catalog."""

    def __init__(
        self,
        doctors: Optional[Iterable[Dict[str, str]]] = None,
        operating_hours: Optional[Dict[str, Any]] = None,
    ):
        doctors = config.DOCTORS if doctors is None else doctors
        self._doctors = tuple(Doctor(**d) for d in doctors)
        self._doctors_by_id = {d.id: d for d in self._doctors}
        self._slots = tuple(generate_time_slots(operating_hours or config.OPERATING_HOURS))

    def list_doctors(self) -> List[Doctor]:
        return list(self._doctors)

    def get_doctor(self, doctor_id: str) -> Optional[Doctor]:
        return self._doctors_by_id.get(doctor_id)

    def slots(self) -> List[str]:
        return list(self._slots)

    def has_slot(self, time: str) -> bool:
        return validate_time(time, self._slots)
