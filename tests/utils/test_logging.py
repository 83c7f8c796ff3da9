import logging

from dialectry.utils.logging import get_correlation_id, get_logger, set_correlation_id, time_call


def test_correlation_id_round_trip():
    token = set_correlation_id("test-token")
    assert token == "test-token"
    assert get_correlation_id() == "test-token"


def test_loggers_live_under_package_namespace():
    assert get_logger("factory").name == "dialectry.factory"


def test_time_call_logs_duration(caplog):
    logger = get_logger("tests.logging")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("unit-test", logger, target="sqlite://", threshold_ms=10_000):
        pass
    records = [record for record in caplog.records if record.name == logger.name]
    assert any("unit-test took" in record.message for record in records)
    assert records[-1].levelno == logging.DEBUG
    assert records[-1].target == "sqlite://"


def test_time_call_warns_when_slow(caplog):
    logger = get_logger("tests.logging.slow")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    with time_call("slow-call", logger, threshold_ms=0):
        pass
    records = [record for record in caplog.records if record.name == logger.name]
    assert records[-1].levelno == logging.WARNING
    assert records[-1].failed is False
