"""Unit tests for session logging setup."""

import pytest
from loguru import logger

import matchboard
from matchboard.utils.logger import provenance_fields, setup_logger


@pytest.fixture(autouse=True)
def reset_sinks():
    yield
    logger.remove()


@pytest.mark.unit
def test_provenance_includes_version_and_extras():
    fields = provenance_fields({"Resume ID": "42"})

    assert fields["matchboard"] == matchboard.__version__
    assert fields["Resume ID"] == "42"
    assert list(fields)[-1] == "Resume ID"


@pytest.mark.unit
def test_session_log_file_gets_header_and_debug_messages(tmp_path):
    log_file = setup_logger("analytics", tmp_path / "session", {"Resume ID": "42"})
    logger.debug("counted 4 records")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert log_file == tmp_path / "session" / "analytics.log"
    assert "Resume ID: 42" in text
    assert "DEBUG   | counted 4 records" in text
