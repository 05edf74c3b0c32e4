"""Tests for command DTOs and error translation."""
from datetime import date

import pytest

from core.dto import (
    AddDosesDTO,
    CancelAppointmentDTO,
    CreateAccountDTO,
    ReserveAppointmentDTO,
    SearchScheduleDTO,
    validate_dto,
)
from core.dto.base import MAX_INTEGER
from core.exceptions import InvalidDateError, ValidationError, WeakPasswordError
from core.security import password_problems
from core.session import Role


def test_reserve_parses_iso_date():
    dto = validate_dto(ReserveAppointmentDTO, slot_date=" 2024-03-01 ", vaccine_name=" Pfizer ")

    assert dto.slot_date == date(2024, 3, 1)
    assert dto.vaccine_name == "Pfizer"


def test_date_objects_pass_through():
    dto = validate_dto(SearchScheduleDTO, slot_date=date(2024, 3, 1))
    assert dto.slot_date == date(2024, 3, 1)


@pytest.mark.parametrize("value", ["2024-13-01", "03/01/2024", "", "soon", "20240301", "2024-W09-5"])
def test_bad_dates_raise_invalid_date(value):
    with pytest.raises(InvalidDateError):
        validate_dto(SearchScheduleDTO, slot_date=value)


def test_blank_vaccine_name_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_dto(ReserveAppointmentDTO, slot_date="2024-03-01", vaccine_name="   ")

    assert exc.value.field == "vaccine_name"
    assert exc.value.message == "Please try again!"


@pytest.mark.parametrize("value", ["0", "-1", "abc"])
def test_cancel_requires_positive_id(value):
    with pytest.raises(ValidationError):
        validate_dto(CancelAppointmentDTO, appointment_id=value)


def test_add_doses_parses_count():
    assert validate_dto(AddDosesDTO, vaccine_name="Pfizer", doses="12").doses == 12


def test_integers_capped_at_column_width():
    """Test ids and dose counts past a 32-bit INTEGER never reach the database."""
    assert validate_dto(CancelAppointmentDTO, appointment_id=MAX_INTEGER).appointment_id == MAX_INTEGER
    assert validate_dto(AddDosesDTO, vaccine_name="Pfizer", doses=MAX_INTEGER).doses == MAX_INTEGER

    with pytest.raises(ValidationError):
        validate_dto(CancelAppointmentDTO, appointment_id=MAX_INTEGER + 1)
    with pytest.raises(ValidationError):
        validate_dto(CancelAppointmentDTO, appointment_id="100000000000000000000")
    with pytest.raises(ValidationError):
        validate_dto(AddDosesDTO, vaccine_name="Pfizer", doses=2**63 - 1)


def test_weak_password_maps_to_policy_message():
    with pytest.raises(WeakPasswordError) as exc:
        validate_dto(CreateAccountDTO, username="pat", password="password", role=Role.PATIENT)

    lines = exc.value.message.splitlines()
    assert lines[0] == "- Password must be at least 8 characters long"
    assert lines[-1].startswith("  - Special characters")


def test_username_with_whitespace_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_dto(CreateAccountDTO, username="p at", password="Secret#123", role="patient")

    assert exc.value.field == "username"


def test_password_problems():
    assert password_problems("Secret#123") == []
    assert password_problems("Ab#1") == ["shorter than 8 characters"]
    assert password_problems("abcdefgh") == [
        "missing uppercase letter",
        "missing digit",
        "missing special character",
    ]
    assert password_problems("Secret#1" + "x" * 70) == ["longer than 72 bytes"]
