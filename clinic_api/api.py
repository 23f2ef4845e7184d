"""Flask REST API for the clinic booking store.

Endpoints:
- Patients: register, list, lookup, appointments of a patient
- Doctors: list, lookup, appointments of a doctor
- Appointments: book, list active, availability, lookup, cancel
- Health check

Every response uses the envelope {success, message?, data?, errors?}.
Routes are served at the root and again under /api for the browser client.
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from clinic_api import config
from clinic_api.config import Settings, load_settings
from clinic_api.errors import (
    AppointmentNotFoundError,
    ClinicError,
    DoctorNotFoundError,
    InputValidationError,
    PatientNotFoundError,
)
from clinic_api.logging_config import RequestIDMiddleware, get_logger, setup_structured_logging
from clinic_api.models import ApiResponse, Appointment
from clinic_api.store import ClinicStore
from clinic_api.validators import validate_appointment_payload, validate_patient_payload

logger = get_logger(__name__)

STORE_KEY = "clinic_store"
SETTINGS_KEY = "clinic_settings"

api = Blueprint("api", __name__)


def get_store() -> ClinicStore:
    return current_app.extensions[STORE_KEY]


def respond(
    status_code: int = 200,
    data: Any = None,
    message: Optional[str] = None,
    errors: Optional[List[Dict[str, str]]] = None,
    error: Optional[str] = None,
):
    """Render the standard envelope; success is derived from the status code."""
    body = ApiResponse(
        success=status_code < 400,
        message=message,
        data=data,
        errors=errors,
        error=error,
    )
    return jsonify(body.model_dump(mode="json", exclude_none=True)), status_code


def request_body() -> Dict[str, Any]:
    """JSON body as a dict; missing or malformed bodies count as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def enrich(appointment: Appointment) -> Dict[str, Any]:
    """Appointment plus patient and doctor summaries for display."""
    store = get_store()
    patient = store.patients.get_by_id(appointment.patient_id)
    doctor = store.catalog.get_doctor(appointment.doctor_id)

    result = appointment.to_dict()
    result["patient"] = patient.summary() if patient else None
    result["doctor"] = doctor.summary() if doctor else None
    return result


# --- Patients ---

@api.route('/patients', methods=['POST'])
def register_patient():
    """POST /patients - Register a new patient.

    Expected JSON body:
    {
        "name": "Juan Pérez",
        "email": "juan@email.com",
        "phone": "3001234567"
    }
    """
    data = request_body()
    errors = validate_patient_payload(data)
    if errors:
        raise InputValidationError(errors)

    patient = get_store().patients.register(
        name=data["name"],
        email=data["email"],
        phone=data["phone"],
    )
    return respond(201, data=patient.to_dict(), message="Patient registered successfully")


@api.route('/patients', methods=['GET'])
def list_patients():
    """GET /patients - All registered patients in registration order."""
    patients = get_store().patients.list()
    return respond(data=[p.to_dict() for p in patients])


@api.route('/patients/<patient_id>', methods=['GET'])
def get_patient(patient_id):
    patient = get_store().patients.get_by_id(patient_id)
    if patient is None:
        raise PatientNotFoundError(patient_id)
    return respond(data=patient.to_dict())


@api.route('/patients/<patient_id>/appointments', methods=['GET'])
def list_patient_appointments(patient_id):
    """GET /patients/<id>/appointments - Active appointments of one patient."""
    store = get_store()
    if store.patients.get_by_id(patient_id) is None:
        raise PatientNotFoundError(patient_id)
    appointments = store.appointments.list_by_patient(patient_id)
    return respond(data=[enrich(a) for a in appointments])


# --- Doctors ---

@api.route('/doctors', methods=['GET'])
def list_doctors():
    doctors = get_store().catalog.list_doctors()
    return respond(data=[d.to_dict() for d in doctors])


@api.route('/doctors/<doctor_id>', methods=['GET'])
def get_doctor(doctor_id):
    doctor = get_store().catalog.get_doctor(doctor_id)
    if doctor is None:
        raise DoctorNotFoundError(doctor_id)
    return respond(data=doctor.to_dict())


@api.route('/doctors/<doctor_id>/appointments', methods=['GET'])
def list_doctor_appointments(doctor_id):
    """GET /doctors/<id>/appointments - Active appointments of one doctor."""
    store = get_store()
    if store.catalog.get_doctor(doctor_id) is None:
        raise DoctorNotFoundError(doctor_id)
    appointments = store.appointments.list_by_doctor(doctor_id)
    return respond(data=[enrich(a) for a in appointments])


# --- Appointments ---

@api.route('/appointments', methods=['POST'])
def create_appointment():
    """POST /appointments - Book a slot.

    Expected JSON body:
    {
        "patientId": "<patient uuid>",
        "doctorId": "1",
        "date": "2025-01-15",
        "time": "09:00"
    }
    """
    data = request_body()
    errors = validate_appointment_payload(data)
    if errors:
        raise InputValidationError(errors)

    appointment = get_store().appointments.book(
        patient_id=data["patientId"],
        doctor_id=data["doctorId"],
        date=data["date"],
        time=data["time"],
    )
    return respond(201, data=enrich(appointment), message="Appointment booked successfully")


@api.route('/appointments', methods=['GET'])
def list_appointments():
    """GET /appointments - Scheduled appointments only."""
    appointments = get_store().appointments.list_active()
    return respond(data=[enrich(a) for a in appointments])


@api.route('/appointments/available', methods=['GET'])
def get_available_slots():
    """GET /appointments/available?doctorId=1&date=2025-01-15"""
    doctor_id = request.args.get('doctorId')
    date = request.args.get('date')

    if not doctor_id or not date:
        errors = []
        if not doctor_id:
            errors.append({"field": "doctorId", "message": "doctorId parameter is required"})
        if not date:
            errors.append({"field": "date", "message": "date parameter is required"})
        raise InputValidationError(errors, message="doctorId and date are required")

    store = get_store()
    doctor = store.catalog.get_doctor(doctor_id)
    if doctor is None:
        raise DoctorNotFoundError(doctor_id)

    return respond(data={
        "doctor": {"id": doctor.id, "name": doctor.name},
        "date": date,
        "availableSlots": store.appointments.available_slots(doctor_id, date),
    })


@api.route('/appointments/<appointment_id>', methods=['GET'])
def get_appointment(appointment_id):
    """GET /appointments/<id> - Lookup, cancelled appointments included."""
    appointment = get_store().appointments.get(appointment_id)
    if appointment is None:
        raise AppointmentNotFoundError(appointment_id)
    return respond(data=enrich(appointment))


@api.route('/appointments/<appointment_id>', methods=['DELETE'])
def cancel_appointment(appointment_id):
    """DELETE /appointments/<id> - Cancel appointment (change status, don't delete)."""
    appointment = get_store().appointments.cancel(appointment_id)
    return respond(
        data=enrich(appointment),
        message=f"Appointment {appointment_id} has been cancelled",
    )


@api.route('/health', methods=['GET'])
def health_check():
    """GET /health - Health check endpoint."""
    return respond(
        message="API is running",
        data={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "totals": get_store().stats(),
        },
    )


# --- Error handling ---

def register_error_handlers(app: Flask):

    @app.errorhandler(ClinicError)
    def handle_clinic_error(exc: ClinicError):
        logger.warning(
            "request_failed",
            code=exc.code,
            status=exc.status_code,
            detail=exc.message,
        )
        return respond(exc.status_code, message=exc.message, errors=exc.errors)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        message = "Endpoint not found" if exc.code == 404 else exc.description
        response, status_code = respond(exc.code or 500, message=message)
        allow = exc.get_response().headers.get("Allow")
        if allow:
            response.headers["Allow"] = allow
        return response, status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        logger.error("unexpected_error", error=str(exc), exc_info=True)
        settings: Settings = current_app.extensions[SETTINGS_KEY]
        return respond(
            500,
            message="Internal server error",
            error=str(exc) if settings.is_development else None,
        )


def create_app(
    store: Optional[ClinicStore] = None,
    settings: Optional[Settings] = None,
) -> Flask:
    """
    Application factory.

    Args:
        store: Store to serve; a fresh one is built when omitted
        settings: Runtime settings; read from the environment when omitted

    Returns:
        Configured Flask app
    """
    settings = settings or load_settings()
    setup_structured_logging(log_level=settings.log_level)

    app = Flask(__name__)
    app.extensions[STORE_KEY] = store or ClinicStore()
    app.extensions[SETTINGS_KEY] = settings
    app.json.sort_keys = False

    CORS(app, origins=settings.cors_origins, expose_headers=["X-Request-ID"])

    app.register_blueprint(api)
    app.register_blueprint(api, url_prefix=config.API_PREFIX, name="api_prefixed")
    register_error_handlers(app)

    app.wsgi_app = RequestIDMiddleware(app.wsgi_app)

    return app
