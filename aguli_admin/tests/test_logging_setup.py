import io
import json
import logging
from aguli_admin.logging_setup import RedactingJsonFormatter, SERVICE_NAME, log_event, request_id_var

def _capture(extra):
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(RedactingJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s'))
    logger = logging.getLogger("aguli-admin-format-test")
    logger.propagate = False
    logger.addHandler(handler)
    old_level = logger.level
    logger.setLevel(logging.INFO)
    try:
        logger.info("backend_request", extra=extra)
    finally:
        logger.setLevel(old_level)
        logger.removeHandler(handler)
    return json.loads(stream.getvalue())

def test_secret_fields_are_redacted():
    line = _capture({"api_key": "saas-key", "backend_token": "tok", "path": "/explore/add"})
    assert line["api_key"] == "***REDACTED***"
    assert line["backend_token"] == "***REDACTED***"
    assert line["path"] == "/explore/add"
    assert line["service_name"] == SERVICE_NAME
    assert line["level"] == "INFO"

def test_request_id_attached():
    token = request_id_var.set("req-42")
    try:
        line = _capture({})
    finally:
        request_id_var.reset(token)
    assert line["request_id"] == "req-42"

def test_log_event_drops_empty_fields(caplog):
    with caplog.at_level(logging.INFO, logger=SERVICE_NAME):
        log_event("explore_images_dropped", accepted=2, rejected=None)

    record = caplog.records[-1]
    assert record.event == "explore_images_dropped"
    assert record.accepted == 2
    assert not hasattr(record, "rejected")
