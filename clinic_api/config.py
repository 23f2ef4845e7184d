"""Configuration for the clinic booking API.

Business data (doctors, operating hours) is centralized here - modify as
needed without touching code. Runtime settings come from the environment.
"""
import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DOCTORS = [
    {"id": "1", "name": "Dr. María García", "specialty": "Medicina General"},
    {"id": "2", "name": "Dr. Carlos Rodríguez", "specialty": "Pediatría"},
    {"id": "3", "name": "Dr. Ana Martínez", "specialty": "Cardiología"},
    {"id": "4", "name": "Dr. Luis Hernández", "specialty": "Dermatología"},
]

OPERATING_HOURS = {
    "start_time": "08:00",
    "end_time": "18:00",
    "slot_duration_minutes": 30,
    "lunch_break": {
        "start": "12:00",
        "end": "14:00"
    }
}

DEFAULT_PORT = 3000
API_PREFIX = "/api"


class Settings(BaseModel):
    """Runtime settings for the HTTP server."""
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=DEFAULT_PORT, gt=0, le=65535, description="Listen port")
    app_env: str = Field(default="production", description="production or development")
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"


def load_settings() -> Settings:
    """
    Build settings from environment variables (.env is loaded first).

    Returns:
        Settings populated from HOST, PORT, APP_ENV, LOG_LEVEL, CORS_ORIGINS
    """
    load_dotenv()

    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", DEFAULT_PORT)),
        app_env=os.getenv("APP_ENV", "production"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )
