"""Unit tests for the collector manager."""

import pytest
from prometheus_client import CollectorRegistry, generate_latest

from druid_exporter.core.config import MetricsSettings
from druid_exporter.core.manager import DruidPrometheusManager
from tests.conftest import make_pool_record


class TestDruidPrometheusManager:
    """Tests for settings-driven collector construction and registration."""

    def test_creates_collector_with_default_flags(self, data_sources, web_app):
        settings = MetricsSettings(tags={"env": "prod"})

        manager = DruidPrometheusManager(settings, data_sources, web_app)

        assert manager.is_enabled()
        assert manager.collector is not None
        assert manager.collector.enable_sql is True
        assert manager.collector.enable_uri is True

    def test_group_flags_from_settings(self, data_sources):
        settings = MetricsSettings(enable={"druid-sql": False, "druid-uri": False})

        manager = DruidPrometheusManager(settings, data_sources)

        assert manager.collector.enable_sql is False
        assert manager.collector.enable_uri is False

    def test_disabled_creates_no_collector(self, data_sources):
        manager = DruidPrometheusManager(MetricsSettings(enable={"druid": False}), data_sources)

        assert manager.collector is None
        assert manager.register_collector(CollectorRegistry()) is False

    def test_register_collector_exposes_metrics(self, data_sources):
        data_sources.add_pool(make_pool_record("main", ActiveCount=3))
        settings = MetricsSettings(tags={"env": "prod"}, enable={"druid-sql": False})
        manager = DruidPrometheusManager(settings, data_sources)
        registry = CollectorRegistry()

        assert manager.register_collector(registry) is True

        output = generate_latest(registry).decode()
        assert 'druid_active_count{env="prod",pool="main"} 3.0' in output

    def test_register_twice_is_noop(self, data_sources):
        manager = DruidPrometheusManager(MetricsSettings(), data_sources)
        registry = CollectorRegistry()

        assert manager.register_collector(registry) is True
        assert manager.register_collector(registry) is False

    @pytest.mark.parametrize("key", ["druid", "druid-sql", "druid-uri", "unknown"])
    def test_missing_flags_default_to_enabled(self, data_sources, key):
        manager = DruidPrometheusManager(MetricsSettings(), data_sources)
        assert manager.is_enabled(key)
