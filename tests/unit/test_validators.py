"""Unit tests for input validators.

Cases picked by equivalence partitioning (valid/invalid formats) and
boundary values (phone length 7-15, today vs yesterday).
"""
import pytest
from datetime import date, timedelta

from clinic_api.validators import (
    validate_appointment_payload,
    validate_date,
    validate_email,
    validate_name,
    validate_patient_payload,
    validate_phone,
    validate_time,
)

SLOTS = ["08:00", "08:30", "09:00", "14:00"]


class TestValidateEmail:

    @pytest.mark.parametrize("email", [
        "test@email.com",
        "user@sub.domain.com",
        "user123@email.com",
        "user.name@email.com",
        "user+tag@email.com",
        "  padded@email.com  ",
    ])
    def test_accepts_valid_emails(self, email):
        assert validate_email(email) is True

    @pytest.mark.parametrize("email", [
        "testemail.com",
        "test@",
        "test@domain",
        "@email.com",
        "te st@email.com",
        "test@@email.com",
        "",
        None,
        123,
    ])
    def test_rejects_invalid_emails(self, email):
        assert validate_email(email) is False


class TestValidatePhone:

    def test_accepts_minimum_length(self):
        assert validate_phone("1234567") is True

    def test_accepts_maximum_length(self):
        assert validate_phone("123456789012345") is True

    def test_rejects_below_minimum(self):
        assert validate_phone("123456") is False

    def test_rejects_above_maximum(self):
        assert validate_phone("1234567890123456") is False

    def test_ignores_spaces_and_dashes(self):
        assert validate_phone("300 123-4567") is True

    @pytest.mark.parametrize("phone", ["300123456a", "+573001234567", "(300)1234567", "", None, 3001234567])
    def test_rejects_non_digits_and_non_strings(self, phone):
        assert validate_phone(phone) is False


class TestValidateName:

    def test_accepts_name(self):
        assert validate_name("Juan Pérez") is True

    def test_accepts_single_character(self):
        assert validate_name("J") is True

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None, 42])
    def test_rejects_blank_or_missing(self, name):
        assert validate_name(name) is False


class TestValidateDate:

    def test_today_is_valid(self):
        today = date(2030, 5, 10)
        assert validate_date("2030-05-10", today=today) is True

    def test_future_is_valid(self):
        today = date(2030, 5, 10)
        assert validate_date("2030-12-31", today=today) is True

    def test_yesterday_is_rejected(self):
        today = date(2030, 5, 10)
        assert validate_date("2030-05-09", today=today) is False

    def test_defaults_to_current_day(self):
        assert validate_date(date.today().isoformat()) is True
        assert validate_date((date.today() - timedelta(days=1)).isoformat()) is False

    @pytest.mark.parametrize("value", [
        "2030/05/10",
        "10-05-2030",
        "2030-5-10",
        "2030-05-10T09:00",
        "2030-02-30",
        "2030-13-01",
        "",
        None,
    ])
    def test_rejects_malformed_dates(self, value):
        assert validate_date(value, today=date(2030, 1, 1)) is False


class TestValidateTime:

    def test_accepts_catalog_slot(self):
        assert validate_time("09:00", SLOTS) is True

    def test_rejects_slot_outside_catalog(self):
        assert validate_time("13:00", SLOTS) is False

    def test_uses_supplied_catalog(self):
        assert validate_time("13:00", ["13:00"]) is True

    @pytest.mark.parametrize("value", ["", None, 900])
    def test_rejects_missing(self, value):
        assert validate_time(value, SLOTS) is False


class TestPayloadValidation:

    def test_valid_patient_payload_has_no_errors(self):
        errors = validate_patient_payload({
            "name": "Juan Pérez",
            "email": "juan@email.com",
            "phone": "3001234567"
        })
        assert errors == []

    def test_empty_patient_payload_reports_every_field(self):
        errors = validate_patient_payload({})
        assert [e["field"] for e in errors] == ["name", "email", "phone"]

    def test_appointment_payload_reports_past_date(self):
        today = date(2030, 5, 10)
        errors = validate_appointment_payload({
            "patientId": "p-1",
            "doctorId": "1",
            "date": "2030-05-09",
            "time": "09:00"
        }, today=today)
        assert [e["field"] for e in errors] == ["date"]

    def test_appointment_payload_only_requires_time_presence(self):
        """Catalog membership is left to the ledger."""
        errors = validate_appointment_payload({
            "patientId": "p-1",
            "doctorId": "1",
            "date": "2030-05-10",
            "time": "13:00"
        }, today=date(2030, 5, 10))
        assert errors == []

    def test_empty_appointment_payload_reports_every_field(self):
        errors = validate_appointment_payload({})
        assert [e["field"] for e in errors] == ["patientId", "doctorId", "date", "time"]
