"""In-memory clinic appointment booking API."""
from clinic_api.api import create_app
from clinic_api.store import ClinicStore

__version__ = "1.0.0"

__all__ = ["create_app", "ClinicStore", "__version__"]
