"""Tests for logging helpers and correlation IDs."""

import re

import pytest

from urlindex.utils.logger import (
    base36_encode,
    configure_logging,
    generate_request_id,
    get_correlation_id,
    get_request_context,
    is_debug_enabled,
    logger,
    loguru_logger,
    with_correlation_id,
)


@pytest.fixture
def captured():
    messages: list[str] = []
    sink_id = loguru_logger.add(
        lambda message: messages.append(str(message)),
        format="{extra[correlation_id]} {message}",
        level="DEBUG",
    )
    yield messages
    loguru_logger.remove(sink_id)


class TestRequestIds:
    def test_base36(self):
        assert base36_encode(0) == "0"
        assert base36_encode(35) == "z"
        assert base36_encode(36) == "10"

    def test_request_id_format(self):
        assert re.fullmatch(r"req_[0-9a-z]+_[0-9a-f]{8}", generate_request_id())

    def test_request_ids_are_unique(self):
        assert generate_request_id() != generate_request_id()


class TestCorrelationContext:
    def test_no_context_by_default(self):
        assert get_request_context() is None
        assert get_correlation_id() is None

    def test_context_is_scoped(self):
        with with_correlation_id("req_abc", operation="rescan") as ctx:
            assert get_correlation_id() == "req_abc"
            assert ctx.operation == "rescan"
            assert ctx.start_time is not None
        assert get_correlation_id() is None

    def test_nested_contexts_restore(self):
        with with_correlation_id("outer"):
            with with_correlation_id("inner"):
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "outer"


class TestLogOutput:
    def test_records_carry_correlation_id(self, captured):
        with with_correlation_id("req_xyz"):
            logger.warning("inside")
        logger.warning("outside")

        assert captured[0].startswith("req_xyz inside")
        assert captured[1].startswith("- outside")

    def test_configure_logging_writes_warnings_to_stderr(self, capsys):
        configure_logging(debug=False)
        logger.warning("to stderr")
        logger.info("hidden")

        err = capsys.readouterr().err
        assert "to stderr" in err
        assert "hidden" not in err

    def test_debug_level(self, capsys):
        configure_logging(debug=True)
        logger.debug("details")
        assert "details" in capsys.readouterr().err

    def test_debug_env(self, monkeypatch):
        monkeypatch.setenv("URLINDEX_DEBUG", "true")
        assert is_debug_enabled()
        monkeypatch.setenv("URLINDEX_DEBUG", "0")
        assert not is_debug_enabled()
