"""Stat source adapters."""

from druid_exporter.adapters.stat_source.fake import (
    FakeDataSourceStatFacade,
    FakeWebAppStatFacade,
)

__all__ = ["FakeDataSourceStatFacade", "FakeWebAppStatFacade"]
