"""Scrape renderer adapters."""

from druid_exporter.adapters.scrape_renderer.prometheus import PrometheusScrapeRenderer

__all__ = ["PrometheusScrapeRenderer"]
