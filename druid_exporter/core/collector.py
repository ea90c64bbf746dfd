"""Prometheus collector for Druid connection pool statistics.

Each ``collect()`` is a stateless translation of the current statistics
into metric families; nothing is carried over between scrapes.  Register
it on a ``CollectorRegistry`` and the registry calls ``collect()`` for
every scrape of ``/metrics``.
"""

from collections.abc import Mapping

from prometheus_client.core import GaugeMetricFamily
from prometheus_client.registry import Collector

from druid_exporter.core.assembler import MetricFamilyAssembler
from druid_exporter.core.config import validate_tags
from druid_exporter.core.fields import (
    POOL_GROUP,
    SQL_GROUP,
    URI_GROUP,
    MetricKind,
    StatGroup,
    fields_for,
)
from druid_exporter.core.logging import logger
from druid_exporter.core.protocols.stat_source import StatRecord
from druid_exporter.core.stat_source import StatSourceAdapter


class DruidCollector(Collector):
    """Translates Druid pool, SQL and URI statistics into gauge families.

    ``enable_sql`` and ``enable_uri`` may be toggled at runtime; each scrape
    reads them once at the start.  The pool group is always collected.
    """

    def __init__(
        self,
        source: StatSourceAdapter,
        tags: Mapping[str, str],
        *,
        enable_sql: bool = True,
        enable_uri: bool = True,
    ) -> None:
        tags = validate_tags(tags)
        self.enable_sql = enable_sql
        self.enable_uri = enable_uri
        self._source = source
        self._assembler = MetricFamilyAssembler(tags)
        self._logger = logger.with_context(component="druid_collector")

    def collect(self) -> list[GaugeMetricFamily]:
        enable_sql = self.enable_sql
        enable_uri = self.enable_uri

        try:
            pool_records = self._source.pool_records()
            sql_records = self._source.sql_records(enable_sql)
            uri_records = self._source.uri_records(enable_uri)

            families: list[GaugeMetricFamily] = []
            families.extend(self._build_group(POOL_GROUP, pool_records))
            if enable_sql:
                families.extend(self._build_group(SQL_GROUP, sql_records))
            if enable_uri:
                families.extend(self._build_group(URI_GROUP, uri_records))
        except Exception as e:
            self._logger.error(f"Druid scrape failed: {e}")
            raise

        self._logger.debug(
            f"Collected {len(families)} metric families from {len(pool_records)} pools, "
            f"{len(sql_records)} statements, {len(uri_records)} URIs"
        )
        return families

    def _build_group(
        self, group: StatGroup, records: list[StatRecord]
    ) -> list[GaugeMetricFamily]:
        """Build every family of *group*: gauges, then histograms, then error gauges."""
        rows = fields_for(group)
        families = [
            self._assembler.build_gauge(group, row.field, records)
            for row in rows
            if row.kind is MetricKind.GAUGE
        ]
        families.extend(
            self._assembler.build_histogram(group, row.field, records)
            for row in rows
            if row.kind is MetricKind.HISTOGRAM
        )
        families.extend(
            self._assembler.build_error_gauge(group, row.field, records)
            for row in rows
            if row.kind is MetricKind.ERROR_GAUGE
        )
        return families
