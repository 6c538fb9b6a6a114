import logging

from physq import Dimensionless, LengthUnit, Unit
from physq.utils.logging import Debug, GetLogger, Info, SetLoggingLevel


def test_library_logger():
    logger = GetLogger()
    assert logger.name == "physq"
    assert any(isinstance(handler, logging.NullHandler) for handler in logger.handlers)


def test_set_logging_level():
    logger = GetLogger()
    previous = logger.level
    try:
        SetLoggingLevel(logging.WARNING)
        assert logger.level == logging.WARNING
    finally:
        SetLoggingLevel(previous)


def test_helpers_log(caplog):
    caplog.set_level(logging.DEBUG, logger="physq")
    Debug("debug %s", "message")
    Info("info message")
    assert [record.levelname for record in caplog.records] == ["DEBUG", "INFO"]
    assert caplog.records[0].getMessage() == "debug message"


def test_parse_miss_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="physq")
    assert LengthUnit.parse("furlong") is None
    assert "Unknown LengthUnit spelling 'furlong'" in caplog.text


def test_case_insensitive_match_is_logged(caplog):
    caplog.set_level(logging.INFO, logger="physq")
    assert LengthUnit.parse("FT") is LengthUnit.Foot
    assert "Matched LengthUnit spelling 'FT' to 'ft' ignoring case" in caplog.text


def test_ambiguous_spelling_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="physq")

    class ConductanceUnit(Unit):
        Millisiemens = "mS"
        Megasiemens = "MS", 1.0e9

    ConductanceUnit.define(ConductanceUnit.Millisiemens, Dimensionless)
    assert "ConductanceUnit spelling 'ms' is ambiguous ignoring case" in caplog.text
    assert ConductanceUnit.parse("MS") is ConductanceUnit.Megasiemens
    assert ConductanceUnit.parse("Ms") is None
