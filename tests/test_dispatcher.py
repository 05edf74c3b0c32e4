"""Tests for console command dispatching and rendering."""
import pytest
import pytest_asyncio

from console.dispatcher import Command, CommandDispatcher
from console.messages import CommonMessages, ErrorMessages
from console.middlewares import setup_middlewares
from core.session import SessionState


@pytest_asyncio.fixture
async def dispatcher(booking):
    dispatcher = CommandDispatcher(booking)
    setup_middlewares(dispatcher)
    return dispatcher


async def run(dispatcher, *lines):
    output = []
    for line in lines:
        output.extend(await dispatcher.dispatch(line))
    return output


def test_command_parse():
    assert Command.parse("  reserve   2024-03-01 Pfizer ") == Command("reserve", ("2024-03-01", "Pfizer"))
    assert Command.parse("   ") is None


def test_greeting_lists_commands():
    lines = CommonMessages.greeting()

    assert lines[0] == CommonMessages.WELCOME
    assert lines[1:] == CommonMessages.help_lines()
    assert "> cancel <appointment_id>" in lines


@pytest.mark.asyncio
async def test_create_and_login(dispatcher, password):
    assert await run(dispatcher, f"create_patient pat {password}") == ["Created user pat"]
    assert await run(dispatcher, f"create_caregiver pat {password}") == ["Username taken, try again!"]

    assert await run(dispatcher, f"login_patient pat {password}") == ["Logged in as: pat"]
    assert dispatcher.ctx.state == SessionState.LOGGED_IN_PATIENT

    assert await run(dispatcher, f"login_caregiver alice {password}") == ["User already logged in."]
    assert dispatcher.ctx.username == "pat"

    assert await run(dispatcher, "logout") == ["Successfully logged out!"]
    assert dispatcher.ctx.state == SessionState.LOGGED_OUT


@pytest.mark.asyncio
async def test_argument_count_errors(dispatcher, password):
    assert await run(dispatcher, "create_patient pat") == ["Failed to create user."]
    assert await run(dispatcher, "login_patient pat") == ["Login failed."]

    await run(dispatcher, f"create_caregiver alice {password}", f"login_caregiver alice {password}")
    assert await run(dispatcher, "upload_availability") == ["Please try again!"]
    assert await run(dispatcher, "add_doses Pfizer") == ["Please try again!"]
    assert await run(dispatcher, "show_appointments now") == ["Please try again!"]
    assert await run(dispatcher, "logout now") == ["Please try again!"]
    assert dispatcher.ctx.username == "alice"


@pytest.mark.asyncio
async def test_weak_password_lists_rules(dispatcher):
    output = await run(dispatcher, "create_patient pat password")

    assert output[0] == "- Password must be at least 8 characters long"
    assert len(output) == 6


@pytest.mark.asyncio
async def test_login_failure(dispatcher, password):
    await run(dispatcher, f"create_patient pat {password}")

    assert await run(dispatcher, "login_patient pat Wrong#1234") == ["Login failed."]
    assert await run(dispatcher, f"login_caregiver pat {password}") == ["Login failed."]
    assert dispatcher.ctx.state == SessionState.LOGGED_OUT


@pytest.mark.asyncio
async def test_gating_messages(dispatcher, password):
    assert await run(dispatcher, "reserve 2024-03-01 Pfizer") == ["Please login first!"]
    assert await run(dispatcher, "show_appointments") == ["Please login first!"]
    assert await run(dispatcher, "upload_availability 2024-03-01") == ["Please login as a caregiver first!"]
    assert await run(dispatcher, "logout") == ["Please login first."]

    await run(dispatcher, f"create_patient pat {password}", f"login_patient pat {password}")
    assert await run(dispatcher, "upload_availability 2024-03-01") == ["Please login as a caregiver first!"]
    assert await run(dispatcher, "add_doses Pfizer 5") == ["Please login as a caregiver first!"]


@pytest.mark.asyncio
async def test_full_booking_flow(dispatcher, password):
    await run(
        dispatcher,
        f"create_caregiver alice {password}",
        f"create_patient pat {password}",
        f"login_caregiver alice {password}",
    )
    assert await run(dispatcher, "upload_availability 2024-03-01") == ["Availability uploaded!"]
    assert await run(dispatcher, "upload_availability 2024-03-01") == [
        "Availability already uploaded for this date!"
    ]
    assert await run(dispatcher, "add_doses Pfizer 5") == ["Doses updated!"]
    assert await run(dispatcher, "add_doses Pfizer abc") == ["Please try again!"]
    assert await run(dispatcher, "show_appointments") == ["You have no appointment! Having a good day!"]
    await run(dispatcher, "logout", f"login_patient pat {password}")

    assert await run(dispatcher, "search_caregiver_schedule 2024-03-01") == [
        "Available Caregivers: alice",
        "Vaccines: Pfizer Available Doses: 5",
    ]
    assert await run(dispatcher, "search_caregiver_schedule 2024-03-02") == ["No available caregiver!"]
    assert await run(dispatcher, "reserve 2024-03-01 Moderna") == ["No available vaccine!"]
    assert await run(dispatcher, "reserve 2024-03-01 Pfizer") == [
        "Appointment ID: 1",
        "Caregiver username: alice",
    ]
    assert await run(dispatcher, "reserve 2024-03-01 Pfizer") == ["No available caregiver!"]

    assert await run(dispatcher, "show_appointments") == [
        "Appointment ID: 1",
        "Vaccine: Pfizer",
        "Date: 2024-03-01",
        "Caregiver: alice",
    ]

    await run(dispatcher, "logout", f"login_caregiver alice {password}")
    assert await run(dispatcher, "show_appointments") == [
        "Appointment ID: 1",
        "Vaccine: Pfizer",
        "Date: 2024-03-01",
        "Patient: pat",
    ]
    assert await run(dispatcher, "cancel 2") == ["You have no such appointment!"]
    assert await run(dispatcher, "cancel one") == ["Please try again!"]
    assert await run(dispatcher, "cancel 1") == ["Canceled successfully!"]
    assert await run(dispatcher, "search_caregiver_schedule 2024-03-01") == [
        "Available Caregivers: alice",
        "Vaccines: Pfizer Available Doses: 5",
    ]


@pytest.mark.asyncio
async def test_invalid_date(dispatcher, password):
    await run(dispatcher, f"create_caregiver alice {password}", f"login_caregiver alice {password}")

    assert await run(dispatcher, "upload_availability 2024-13-01") == ["Please enter a valid date!"]
    assert await run(dispatcher, "search_caregiver_schedule 01/03/2024") == ["Please enter a valid date!"]


@pytest.mark.asyncio
async def test_console_commands(dispatcher):
    assert await run(dispatcher, "") == ["Please try again!"]
    assert await run(dispatcher, "frobnicate") == ["Invalid operation name!"]

    help_lines = await run(dispatcher, "help")
    assert help_lines[0] == "*** Please enter one of the following commands ***"
    assert "> reserve <date> <vaccine>" in help_lines

    assert not dispatcher.finished
    assert await run(dispatcher, "quit") == ["Bye!"]
    assert dispatcher.finished


@pytest.mark.asyncio
async def test_unexpected_error_is_contained(dispatcher, password, monkeypatch):
    await run(dispatcher, f"create_patient pat {password}", f"login_patient pat {password}")

    async def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(dispatcher.booking, "list_appointments", explode)

    assert await run(dispatcher, "show_appointments") == [ErrorMessages.GENERIC_ERROR]
    assert dispatcher.ctx.username == "pat"


@pytest.mark.asyncio
async def test_oversized_numbers_rejected(dispatcher, password):
    await run(dispatcher, f"create_caregiver alice {password}", f"login_caregiver alice {password}")

    assert await run(dispatcher, "add_doses Pfizer 9223372036854775807") == ["Please try again!"]
    assert await run(dispatcher, "cancel 100000000000000000000") == ["Please try again!"]
    assert await run(dispatcher, "add_doses Pfizer 2147483647") == ["Doses updated!"]
    assert await run(dispatcher, "add_doses Pfizer 1") == ["Please try again!"]
