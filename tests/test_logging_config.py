"""Tests for structured logging setup."""
import json
import logging

from console.logging_config import JSONFormatter, setup_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        name="services.booking",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Appointment %s reserved",
        args=(7,),
        exc_info=None,
    )
    record.appointment_id = 7
    record.username = "pat"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "Appointment 7 reserved"
    assert payload["level"] == "INFO"
    assert payload["appointment_id"] == 7
    assert payload["username"] == "pat"
    assert "vaccine" not in payload


def test_setup_logging_writes_json_files(tmp_path):
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    try:
        setup_logging(tmp_path)
        logging.getLogger("services.booking").error(
            "Storage error", extra={"command": "reserve"}
        )
        for handler in root.handlers:
            handler.flush()

        lines = (tmp_path / "errors.log").read_text(encoding="utf-8").splitlines()
        payload = json.loads(lines[-1])
        assert payload["message"] == "Storage error"
        assert payload["command"] == "reserve"
        assert (tmp_path / "vaccine_scheduler.log").exists()
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
