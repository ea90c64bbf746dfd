"""Core protocols for the exporter's collaborators."""

from druid_exporter.core.protocols.scrape_renderer import ScrapeRenderer
from druid_exporter.core.protocols.stat_source import (
    DataSourceStatFacade,
    StatRecord,
    WebAppStatFacade,
)

__all__ = [
    "DataSourceStatFacade",
    "ScrapeRenderer",
    "StatRecord",
    "WebAppStatFacade",
]
