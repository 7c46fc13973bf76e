from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from foodorder.api.middleware.request_context import request_id_context
from foodorder.infrastructure.observability.logging_config import JsonFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        "foodorder.test", logging.INFO, __file__, 1, "order_placed", None, None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_emits_extra_fields_and_request_id() -> None:
    token = request_id_context.set("req-123")
    try:
        line = JsonFormatter().format(_record(order_id=7, food_item_id=2))
    finally:
        request_id_context.reset(token)

    payload = json.loads(line)
    assert payload["message"] == "order_placed"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "foodorder.test"
    assert payload["request_id"] == "req-123"
    assert payload["order_id"] == 7
    assert payload["food_item_id"] == 2
    assert payload["trace_id"] is None


def test_formatter_omits_standard_record_attributes() -> None:
    payload = json.loads(JsonFormatter().format(_record()))

    for attribute in ("args", "msg", "levelno", "pathname", "lineno", "thread"):
        assert attribute not in payload
    assert payload["request_id"] is None


def test_formatter_includes_exception_text() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "foodorder.test", logging.ERROR, __file__, 1, "request_error", None, sys.exc_info()
        )

    payload = json.loads(JsonFormatter().format(record))
    assert "ValueError: boom" in payload["exception"]
