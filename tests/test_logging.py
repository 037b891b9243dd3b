# ============================================================================
# STRUCTURED LOGGING TESTS
# ============================================================================
# STATUS: Tests - Context-aware logging
# PURPOSE: Verify context stack, adapters and formatters
# CREATED: 18 OCT 2026
# ============================================================================
"""
Structured Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import json
import logging

from schemaddl.logging import (
    ComponentType,
    ContextLogger,
    HumanFormatter,
    StructuredFormatter,
    get_current_context,
    get_logger,
    log_context,
)


def _record(msg="hello", extra=None):
    record = logging.LogRecord(
        name="schemaddl.test", level=logging.INFO, pathname=__file__,
        lineno=10, msg=msg, args=(), exc_info=None, func="test",
    )
    if extra is not None:
        record.extra = extra
    return record


class TestLogContext:
    def test_empty_outside_context(self):
        assert get_current_context().to_dict() == {}

    def test_nested_contexts_merge(self):
        with log_context(dialect="postgresql", operation="generate"):
            with log_context(table_id="t1", extra={"k": 1}):
                ctx = get_current_context()
                assert ctx.to_dict() == {
                    "dialect": "postgresql",
                    "operation": "generate",
                    "table_id": "t1",
                    "k": 1,
                }
            assert get_current_context().table_id is None
        assert get_current_context().dialect is None


class TestContextLogger:
    def test_get_logger_returns_adapter(self):
        logger = get_logger("schemaddl.test", ComponentType.RENDERER)
        assert isinstance(logger, ContextLogger)
        assert logger.extra == {"component": "renderer"}

    def test_process_merges_context_and_component(self):
        logger = get_logger("schemaddl.test", ComponentType.ORDERER)
        with log_context(table_id="t9"):
            _, kwargs = logger.process("msg", {"extra": {"rows": 3}})
        assert kwargs["extra"]["extra"] == {"rows": 3, "table_id": "t9", "component": "orderer"}

    def test_records_reach_handlers(self, caplog):
        logger = get_logger("schemaddl.test")
        with caplog.at_level(logging.INFO, logger="schemaddl.test"):
            with log_context(dialect="mysql"):
                logger.info("rendered")
        assert caplog.records[-1].getMessage() == "rendered"
        assert caplog.records[-1].extra["dialect"] == "mysql"


class TestFormatters:
    def test_structured_formatter_emits_json(self):
        formatter = StructuredFormatter()
        with log_context(table_id="t1"):
            payload = json.loads(formatter.format(_record(extra={"n": 2})))
        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "schemaddl.test"
        assert payload["context"] == {"table_id": "t1"}
        assert payload["data"] == {"n": 2}
        assert payload["source"]["line"] == 10

    def test_structured_formatter_optional_fields(self):
        formatter = StructuredFormatter(include_timestamp=False, include_context=False)
        payload = json.loads(formatter.format(_record()))
        assert "timestamp" not in payload
        assert "context" not in payload
        assert "data" not in payload

    def test_human_formatter_inlines_context(self):
        formatter = HumanFormatter()
        with log_context(dialect="google_standard_sql", table_id="t1", operation="create_table"):
            line = formatter.format(_record())
        assert "[dialect=google_standard_sql, table=t1, op=create_table]" in line
        assert line.endswith("schemaddl.test [dialect=google_standard_sql, table=t1, op=create_table]: hello")
