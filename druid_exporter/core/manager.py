"""Builds and registers the Druid collector from settings.

The ``druid`` flag decides whether a collector exists at all; ``druid-sql``
and ``druid-uri`` seed the collector's runtime-toggleable group flags.
"""

from __future__ import annotations

from prometheus_client import CollectorRegistry

from druid_exporter.core.collector import DruidCollector
from druid_exporter.core.config import DRUID_KEY, DRUID_SQL_KEY, DRUID_URI_KEY, MetricsSettings
from druid_exporter.core.logging import logger
from druid_exporter.core.protocols.stat_source import DataSourceStatFacade, WebAppStatFacade
from druid_exporter.core.stat_source import StatSourceAdapter


class DruidPrometheusManager:
    """Owns the collector's lifecycle for one host process."""

    def __init__(
        self,
        settings: MetricsSettings,
        data_sources: DataSourceStatFacade,
        web_app: WebAppStatFacade | None = None,
    ) -> None:
        self._settings = settings
        self._collector: DruidCollector | None = None
        self._registered = False

        if self.is_enabled():
            self._collector = DruidCollector(
                StatSourceAdapter(data_sources, web_app),
                settings.tags,
                enable_sql=self.is_enabled(DRUID_SQL_KEY),
                enable_uri=self.is_enabled(DRUID_URI_KEY),
            )
            logger.info(
                f"[DruidMetrics] Collector created: tags={list(settings.tags)}, "
                f"sql={self._collector.enable_sql}, uri={self._collector.enable_uri}"
            )
        else:
            logger.info("[DruidMetrics] Disabled by configuration, no collector created")

    @property
    def collector(self) -> DruidCollector | None:
        return self._collector

    def is_enabled(self, key: str = DRUID_KEY) -> bool:
        return self._settings.is_enabled(key)

    def register_collector(self, registry: CollectorRegistry) -> bool:
        """Register the collector on *registry*.

        Returns:
            True if a collector was registered, False when disabled or
            already registered.
        """
        if self._collector is None or not self.is_enabled():
            return False
        if self._registered:
            logger.warning("[DruidMetrics] Collector already registered, skipping")
            return False

        registry.register(self._collector)
        self._registered = True
        logger.info("[DruidMetrics] Collector registered")
        return True
