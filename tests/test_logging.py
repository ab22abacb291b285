"""JSON log formatting."""

import json
import logging

import pytest

from shared.infrastructure.logging import CustomJsonFormatter, get_logger, log_latency, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _format(**extra):
    formatter = CustomJsonFormatter("%(name)s %(levelname)s %(message)s", environment="test")
    record = logging.LogRecord("exams", logging.INFO, __file__, 1, "Exam saved", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return json.loads(formatter.format(record))


def test_formatter_adds_timestamp_and_environment():
    payload = _format(exam_id=8)

    assert payload["message"] == "Exam saved"
    assert payload["exam_id"] == 8
    assert payload["environment"] == "test"
    assert payload["timestamp"]


def test_formatter_redacts_secrets():
    payload = _format(db_password="hunter2", auth_token="abc", api_key="xyz")

    assert payload["db_password"] == "***REDACTED***"
    assert payload["auth_token"] == "***REDACTED***"
    assert payload["api_key"] == "***REDACTED***"


def test_setup_logging_writes_json_to_stdout(capsys, restore_root_logger):
    setup_logging(level="DEBUG", environment="test")

    get_logger("exams.test").info("Exam composed", extra={"exam_name": "Docker"})

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["exam_name"] == "Docker"
    assert payload["levelname"] == "INFO"


def test_log_latency_reports_operation(capsys, restore_root_logger):
    setup_logging(level="INFO", environment="test")

    with log_latency(get_logger("exams.test"), "exam_save", exam_name="Docker"):
        pass

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["message"] == "exam_save completed"
    assert payload["operation"] == "exam_save"
    assert payload["latency_ms"] >= 0
