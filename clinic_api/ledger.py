"""Appointment ledger: booking, cancellation and availability.

A slot is occupied when a SCHEDULED appointment exists for the exact
(doctor_id, date, time) triple. Booking, cancellation and the availability
listing all use Appointment.occupies, so a cancelled appointment frees its
slot for both at once.
"""
import threading
import uuid
from typing import List, Optional

from clinic_api.catalog import Catalog
from clinic_api.errors import (
    AlreadyCancelledError,
    AppointmentNotFoundError,
    DoctorNotFoundError,
    InvalidSlotError,
    PatientNotFoundError,
    SlotUnavailableError,
)
from clinic_api.logging_config import get_logger
from clinic_api.models import Appointment, AppointmentStatus, utc_now, validate_transition
from clinic_api.registry import PatientRegistry

logger = get_logger(__name__)


class AppointmentLedger:
    """
    Authoritative in-memory collection of appointments.

    Appointments are never removed; cancellation flips the status. The
    conflict check and the append in book() and the status flip in cancel()
    run under one lock so concurrent requests cannot double-book a slot.
    """

    def __init__(self, catalog: Catalog, registry: PatientRegistry):
        self.catalog = catalog
        self.registry = registry
        self._appointments: List[Appointment] = []
        self.lock = threading.Lock()

    def book(self, patient_id: str, doctor_id: str, date: str, time: str) -> Appointment:
        """
        Book a slot for a patient.

        Checks run in order: patient exists, doctor exists, time is a
        catalog slot, slot is free.

        Raises:
            PatientNotFoundError: Unknown patient
            DoctorNotFoundError: Unknown doctor
            InvalidSlotError: Time not in the slot catalog
            SlotUnavailableError: Triple already has a scheduled appointment
        """
        if not self.registry.exists(patient_id):
            raise PatientNotFoundError(patient_id)

        if self.catalog.get_doctor(doctor_id) is None:
            raise DoctorNotFoundError(doctor_id)

        if not self.catalog.has_slot(time):
            raise InvalidSlotError(time)

        with self.lock:
            if self._is_occupied(doctor_id, date, time):
                logger.warning(
                    "booking_rejected",
                    reason="slot_taken",
                    doctor_id=doctor_id,
                    date=date,
                    time=time,
                )
                raise SlotUnavailableError(doctor_id, date, time)

            appointment = Appointment(
                id=str(uuid.uuid4()),
                patient_id=patient_id,
                doctor_id=doctor_id,
                date=date,
                time=time,
            )
            self._appointments.append(appointment)

        logger.info(
            "appointment_booked",
            appointment_id=appointment.id,
            patient_id=patient_id,
            doctor_id=doctor_id,
            date=date,
            time=time,
        )
        return appointment.model_copy()

    def cancel(self, appointment_id: str) -> Appointment:
        """
        Cancel an appointment (change status, don't delete).

        Raises:
            AppointmentNotFoundError: Unknown appointment id
            AlreadyCancelledError: Appointment is already cancelled
        """
        with self.lock:
            appointment = self._find(appointment_id)
            if appointment is None:
                raise AppointmentNotFoundError(appointment_id)

            if not validate_transition(appointment.status, AppointmentStatus.CANCELLED):
                raise AlreadyCancelledError(appointment_id)

            appointment.status = AppointmentStatus.CANCELLED
            appointment.cancelled_at = utc_now()
            result = appointment.model_copy()

        logger.info("appointment_cancelled", appointment_id=appointment_id)
        return result

    def get(self, appointment_id: str) -> Optional[Appointment]:
        """Lookup by id, cancelled appointments included."""
        with self.lock:
            appointment = self._find(appointment_id)
            return appointment.model_copy() if appointment else None

    def list_active(self) -> List[Appointment]:
        with self.lock:
            return [a.model_copy() for a in self._appointments if a.is_scheduled]

    def list_by_patient(self, patient_id: str) -> List[Appointment]:
        with self.lock:
            return [
                a.model_copy() for a in self._appointments
                if a.is_scheduled and a.patient_id == patient_id
            ]

    def list_by_doctor(self, doctor_id: str) -> List[Appointment]:
        with self.lock:
            return [
                a.model_copy() for a in self._appointments
                if a.is_scheduled and a.doctor_id == doctor_id
            ]

    def is_slot_available(self, doctor_id: str, date: str, time: str) -> bool:
        with self.lock:
            return not self._is_occupied(doctor_id, date, time)

    def available_slots(self, doctor_id: str, date: str) -> List[str]:
        """Catalog slots for doctor/date not held by a scheduled appointment, in catalog order."""
        with self.lock:
            booked = {
                a.time for a in self._appointments
                if a.occupies(doctor_id, date)
            }
        return [slot for slot in self.catalog.slots() if slot not in booked]

    def count(self) -> int:
        with self.lock:
            return len(self._appointments)

    def clear(self):
        with self.lock:
            self._appointments.clear()

    def _find(self, appointment_id: str) -> Optional[Appointment]:
        return next((a for a in self._appointments if a.id == appointment_id), None)

    def _is_occupied(self, doctor_id: str, date: str, time: str) -> bool:
        return any(a.occupies(doctor_id, date, time) for a in self._appointments)
