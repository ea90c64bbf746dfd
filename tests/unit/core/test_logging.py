"""Unit tests for the contextual logger and scrape logging."""

import logging

import pytest

from druid_exporter.core.collector import DruidCollector
from druid_exporter.core.exceptions import StatContractError
from druid_exporter.core.logging import logger
from tests.conftest import make_pool_record


class TestContextualLogger:
    """Tests for bound logging context."""

    def test_with_context_renders_fields(self, caplog):
        child = logger.with_context(component="test", pool="p1")

        with caplog.at_level(logging.INFO, logger="druid_exporter"):
            child.info("hello")

        assert "hello [component=test pool=p1]" in caplog.text
        assert caplog.records[-1].pool == "p1"

    @pytest.mark.parametrize("key", ["message", "name", "msg", "args"])
    def test_reserved_record_keys_are_prefixed(self, caplog, key):
        child = logger.with_context(**{key: "p1"})

        with caplog.at_level(logging.INFO, logger="druid_exporter"):
            child.info("hello", extra={key: "x"})

        record = caplog.records[-1]
        assert getattr(record, f"ctx_{key}") == "x"
        assert f"hello [ctx_{key}=x]" in caplog.text

    def test_with_context_does_not_mutate_parent(self):
        logger.with_context(component="child")
        assert not logger.extra


class TestScrapeLogging:
    """Tests for what the collector logs."""

    def test_successful_scrape_logged_at_debug(self, source, data_sources, caplog):
        data_sources.add_pool(make_pool_record())
        collector = DruidCollector(source, {}, enable_sql=False, enable_uri=False)

        with caplog.at_level(logging.DEBUG, logger="druid_exporter"):
            collector.collect()

        assert "Collected 41 metric families from 1 pools, 0 statements, 0 URIs" in caplog.text

    def test_failed_scrape_logged_and_reraised(self, source, data_sources, caplog):
        data_sources.add_pool({"Name": "p1"})
        collector = DruidCollector(source, {})

        with caplog.at_level(logging.ERROR, logger="druid_exporter"):
            with pytest.raises(StatContractError):
                collector.collect()

        assert "Druid scrape failed" in caplog.text
