"""Structured logging — JSON lines carry the catalog extra fields."""

import json
import logging

from warehouse_api.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "warehouse_api.test", logging.INFO, __file__, 1, "Category created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_line_has_core_fields():
    line = json.loads(JSONFormatter().format(_record()))
    assert line["level"] == "INFO"
    assert line["logger"] == "warehouse_api.test"
    assert line["message"] == "Category created"
    assert "timestamp" in line


def test_extra_fields_surface_when_present():
    line = json.loads(JSONFormatter().format(
        _record(resource="categories", entity_id=4, username="warehouse"),
    ))
    assert line["resource"] == "categories"
    assert line["entity_id"] == 4
    assert line["username"] == "warehouse"
    assert "error_code" not in line


def test_unknown_extras_are_ignored():
    line = json.loads(JSONFormatter().format(_record(password="s3cret")))
    assert "password" not in line
