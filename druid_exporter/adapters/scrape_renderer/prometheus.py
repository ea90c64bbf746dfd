"""Prometheus text exposition of the Druid collector.

Owns a dedicated CollectorRegistry, so Druid families are isolated from the
default global registry, and registers the manager's collector on it.  A
scrape whose collect() raises is reported as ``ScrapeFailedError`` instead of
an empty payload.
"""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from druid_exporter.core.exceptions import ScrapeFailedError
from druid_exporter.core.logging import logger
from druid_exporter.core.manager import DruidPrometheusManager
from druid_exporter.core.protocols.scrape_renderer import ScrapeRenderer


class PrometheusScrapeRenderer(ScrapeRenderer):
    """Serializes the Druid collector's snapshot per scrape."""

    def __init__(
        self,
        manager: DruidPrometheusManager,
        registry: CollectorRegistry | None = None,
    ) -> None:
        self._registry = registry or CollectorRegistry()
        self._failed_scrapes = 0
        self._logger = logger.with_context(component="scrape_renderer")
        self.enabled = manager.register_collector(self._registry)

    @property
    def content_type(self) -> str:
        return CONTENT_TYPE_LATEST

    @property
    def failed_scrapes(self) -> int:
        return self._failed_scrapes

    def render(self) -> bytes:
        try:
            return generate_latest(self._registry)
        except Exception as e:
            self._failed_scrapes += 1
            self._logger.warning(f"Reporting failed scrape: {e}")
            raise ScrapeFailedError(f"Druid scrape failed: {e}") from e
