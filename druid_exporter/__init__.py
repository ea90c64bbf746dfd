"""Prometheus exporter for Druid connection pool statistics."""

from druid_exporter.core.collector import DruidCollector
from druid_exporter.core.manager import DruidPrometheusManager

__all__ = ["DruidCollector", "DruidPrometheusManager"]
