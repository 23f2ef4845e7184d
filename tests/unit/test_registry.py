"""Tests for the patient registry."""
import pytest

from clinic_api.errors import DuplicateEmailError
from clinic_api.registry import PatientRegistry


@pytest.fixture
def registry():
    return PatientRegistry()


def test_register_creates_patient(registry):
    patient = registry.register("Juan Pérez", "juan@email.com", "3001234567")

    assert patient.id
    assert patient.name == "Juan Pérez"
    assert patient.email == "juan@email.com"
    assert patient.phone == "3001234567"
    assert patient.created_at is not None


def test_register_lowercases_email_only(registry):
    patient = registry.register("  Mixed Case  ", "TEST@EMAIL.COM", "300-123 4567")

    assert patient.email == "test@email.com"
    assert patient.name == "  Mixed Case  "
    assert patient.phone == "300-123 4567"


def test_ids_are_unique(registry):
    first = registry.register("A", "a@email.com", "1234567")
    second = registry.register("B", "b@email.com", "1234567")
    assert first.id != second.id


def test_duplicate_email_is_case_insensitive(registry):
    registry.register("A", "a@b.com", "1234567")

    with pytest.raises(DuplicateEmailError):
        registry.register("Other", "A@B.COM", "7654321")

    assert registry.count() == 1


def test_get_by_id(registry):
    patient = registry.register("A", "a@email.com", "1234567")
    assert registry.get_by_id(patient.id).email == "a@email.com"
    assert registry.get_by_id("missing") is None


def test_get_by_email_is_case_insensitive(registry):
    patient = registry.register("A", "a@email.com", "1234567")
    assert registry.get_by_email("A@Email.COM").id == patient.id
    assert registry.get_by_email("nobody@email.com") is None


def test_list_in_registration_order(registry):
    assert registry.list() == []
    registry.register("A", "a@email.com", "1234567")
    registry.register("B", "b@email.com", "1234567")
    assert [p.name for p in registry.list()] == ["A", "B"]


def test_list_is_a_snapshot(registry):
    registry.register("A", "a@email.com", "1234567")
    snapshot = registry.list()

    registry.register("B", "b@email.com", "1234567")
    snapshot[0].name = "changed"

    assert len(snapshot) == 1
    assert registry.list()[0].name == "A"


def test_clear(registry):
    registry.register("A", "a@email.com", "1234567")
    registry.clear()
    assert registry.list() == []
    registry.register("A again", "a@email.com", "1234567")


def test_duplicate_email_ignores_surrounding_whitespace(registry):
    registry.register("Juan", "juan@email.com", "1234567")

    with pytest.raises(DuplicateEmailError):
        registry.register("Juan again", " JUAN@email.com ", "1234567")

    assert registry.count() == 1


def test_register_trims_email(registry):
    patient = registry.register("Juan", "  Juan@Email.com ", "1234567")

    assert patient.email == "juan@email.com"
    assert registry.get_by_email("juan@email.com").id == patient.id
    assert registry.get_by_email(" JUAN@EMAIL.COM").id == patient.id
