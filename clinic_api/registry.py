"""Patient registry: in-memory patients with case-insensitive unique email."""
import threading
import uuid
from typing import List, Optional

from clinic_api.errors import DuplicateEmailError
from clinic_api.logging_config import get_logger
from clinic_api.models import Patient

logger = get_logger(__name__)


class PatientRegistry:
    """
    Owns patient records for the lifetime of the process.

    Input is assumed to be validated already; the registry only enforces
    the unique-email invariant.
    """

    def __init__(self):
        self._patients: List[Patient] = []
        self.lock = threading.Lock()

    def register(self, name: str, email: str, phone: str) -> Patient:
        """
        Register a new patient.

        Raises:
            DuplicateEmailError: If the trimmed, lower-cased email is already registered
        """
        normalized = email.strip().lower()

        with self.lock:
            if self._find_by_email(normalized) is not None:
                logger.warning("duplicate_email_rejected", email=normalized)
                raise DuplicateEmailError(normalized)

            patient = Patient(
                id=str(uuid.uuid4()),
                name=name,
                email=normalized,
                phone=phone,
            )
            self._patients.append(patient)

        logger.info("patient_registered", patient_id=patient.id)
        return patient.model_copy()

    def get_by_id(self, patient_id: str) -> Optional[Patient]:
        with self.lock:
            patient = next((p for p in self._patients if p.id == patient_id), None)
            return patient.model_copy() if patient else None

    def get_by_email(self, email: str) -> Optional[Patient]:
        with self.lock:
            patient = self._find_by_email(email.strip().lower())
            return patient.model_copy() if patient else None

    def exists(self, patient_id: str) -> bool:
        with self.lock:
            return any(p.id == patient_id for p in self._patients)

    def list(self) -> List[Patient]:
        """All patients in registration order (copies)."""
        with self.lock:
            return [p.model_copy() for p in self._patients]

    def count(self) -> int:
        with self.lock:
            return len(self._patients)

    def clear(self):
        with self.lock:
            self._patients.clear()

    def _find_by_email(self, normalized: str) -> Optional[Patient]:
        return next((p for p in self._patients if p.email == normalized), None)
