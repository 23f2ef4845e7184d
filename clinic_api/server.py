"""Run the clinic booking API.

Run with: python -m clinic_api
"""
from clinic_api.api import create_app, get_store
from clinic_api.config import load_settings


def print_startup_info(app, settings):
    """Print server startup information."""
    with app.app_context():
        store = get_store()
        doctors = store.catalog.list_doctors()
        slots = store.catalog.slots()

    print("=" * 70)
    print("CLINIC BOOKING API")
    print("=" * 70)
    print(f"\nServer: http://localhost:{settings.port}")
    print(f"Environment: {settings.app_env}")
    print(f"Doctors: {len(doctors)}")
    for doctor in doctors:
        print(f"   - {doctor.name} ({doctor.specialty})")
    if slots:
        print(f"Slots per day: {len(slots)} ({slots[0]} - {slots[-1]})")
    else:
        print("Slots per day: 0 (check OPERATING_HOURS)")

    print("\nEndpoints (also under /api):")
    print("   POST   /patients                       - Register patient")
    print("   GET    /patients                       - List patients")
    print("   GET    /patients/<id>                  - Get patient")
    print("   GET    /patients/<id>/appointments     - Patient appointments")
    print("   GET    /doctors                        - List doctors")
    print("   GET    /doctors/<id>                   - Get doctor")
    print("   GET    /doctors/<id>/appointments      - Doctor appointments")
    print("   POST   /appointments                   - Book appointment")
    print("   GET    /appointments                   - List active appointments")
    print("   GET    /appointments/available?...     - Available slots")
    print("   GET    /appointments/<id>              - Get appointment")
    print("   DELETE /appointments/<id>              - Cancel appointment")
    print("   GET    /health                         - Health check")
    print("=" * 70)


def main():
    settings = load_settings()
    app = create_app(settings=settings)
    print_startup_info(app, settings)
    app.run(
        debug=settings.is_development,
        port=settings.port,
        host=settings.host,
        threaded=True,
    )


if __name__ == '__main__':
    main()
