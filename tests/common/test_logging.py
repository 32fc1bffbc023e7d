from __future__ import annotations

import json
import logging
import sys

from ass_client.common.logging import JsonFormatter, setup_logging


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="ass_client.http",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="request method=%s status=%s",
        args=("GET", 200),
        exc_info=None,
    )
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


def test_json_formatter_basic_fields():
    payload = json.loads(JsonFormatter().format(_record()))

    assert payload == {
        "level": "INFO",
        "logger": "ass_client.http",
        "message": "request method=GET status=200",
    }


def test_json_formatter_merges_extra():
    record = _record(extra={"operation": "files.search", "status": 200})

    payload = json.loads(JsonFormatter().format(record))

    assert payload["operation"] == "files.search"
    assert payload["status"] == 200


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record(exc_info=sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: boom" in payload["exception"]


def test_setup_logging_configures_package_logger():
    setup_logging("DEBUG", json_format=False)

    logger = logging.getLogger("ass_client")
    assert logger.level == logging.DEBUG
    assert logger.propagate is False
    assert logger.handlers
    assert not isinstance(logger.handlers[0].formatter, JsonFormatter)

    setup_logging("INFO")

    assert isinstance(logging.getLogger("ass_client").handlers[0].formatter, JsonFormatter)
    logger.propagate = True
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
