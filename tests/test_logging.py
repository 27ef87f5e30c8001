import io
import json
import logging

from tle_track.logging import configure_logging, get_logger, log_context


def _setup_logger(level="INFO"):
    stream = io.StringIO()
    configure_logging(level=level, stream=stream, force=True)
    return get_logger("tests"), stream


def test_json_logging_includes_context_and_extras():
    logger, stream = _setup_logger()
    with log_context(satellite="25544", timestamp_ms=1633175423252):
        logger.info("observation_cache_miss", extra={"observer": "default"})
    payload = json.loads(stream.getvalue())
    assert payload["message"] == "observation_cache_miss"
    assert payload["logger"] == "tle_track.tests"
    assert payload["context"] == {"satellite": "25544", "timestamp_ms": 1633175423252}
    assert payload["extra"]["observer"] == "default"


def test_context_is_reset_after_block():
    logger, stream = _setup_logger()
    with log_context(satellite="25544"):
        pass
    logger.info("outside")
    payload = json.loads(stream.getvalue())
    assert "context" not in payload


def test_level_and_logger_names():
    _setup_logger(level="warning")
    assert logging.getLogger("tle_track").level == logging.WARNING
    assert get_logger().name == "tle_track"
    assert get_logger("tle_track.propagate").name == "tle_track.propagate"
    assert get_logger("propagate").name == "tle_track.propagate"


def test_service_from_config_applies_log_level():
    from propagate.service import TrackingService
    from tle_track.config import load_config

    logging.getLogger("tle_track").handlers.clear()
    TrackingService.from_config(load_config({"TLE_TRACK_LOG_LEVEL": "debug"}))
    assert logging.getLogger("tle_track").level == logging.DEBUG
