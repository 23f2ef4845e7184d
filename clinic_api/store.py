"""Clinic store: the single owner of catalog, registry and ledger."""
from typing import Any, Dict, Iterable, Optional

from clinic_api.catalog import Catalog
from clinic_api.ledger import AppointmentLedger
from clinic_api.logging_config import get_logger
from clinic_api.registry import PatientRegistry

logger = get_logger(__name__)


class ClinicStore:
    """
    Built once at startup and handed to the request handlers.

    Doctors and slots survive reset(); patients and appointments do not.
    """

    def __init__(
        self,
        doctors: Optional[Iterable[Dict[str, str]]] = None,
        operating_hours: Optional[Dict[str, Any]] = None,
    ):
        self.catalog = Catalog(doctors=doctors, operating_hours=operating_hours)
        self.patients = PatientRegistry()
        self.appointments = AppointmentLedger(self.catalog, self.patients)

    def reset(self):
        """Drop all patients and appointments."""
        self.appointments.clear()
        self.patients.clear()
        logger.info("store_reset")

    def stats(self) -> Dict[str, int]:
        return {
            "patients": self.patients.count(),
            "doctors": len(self.catalog.list_doctors()),
            "appointments": self.appointments.count(),
            "active_appointments": len(self.appointments.list_active()),
        }
