"""Fake stat facades for testing.

Hold synthetic stat records in memory so collector tests can drive a
scrape without a live connection pool.
"""

from __future__ import annotations

from collections.abc import Hashable

from druid_exporter.core.protocols.stat_source import (
    DataSourceStatFacade,
    StatRecord,
    WebAppStatFacade,
)


class FakeDataSourceStatFacade(DataSourceStatFacade):
    """In-memory spy implementing the DataSourceStatFacade protocol.

    Usage:
        fake = FakeDataSourceStatFacade()
        fake.add_pool({"Name": "p1", "ActiveCount": 5, ...})
        fake.add_sql("p1", {"Name": "p1", "SQL": "select 1", ...})
    """

    def __init__(self) -> None:
        self.pools: list[StatRecord] = []
        self.sql: dict[Hashable, list[StatRecord]] = {}
        self.sql_calls: list[Hashable] = []

    def add_pool(self, record: StatRecord) -> None:
        self.pools.append(record)

    def add_sql(self, data_source: Hashable, record: StatRecord) -> None:
        self.sql.setdefault(data_source, []).append(record)

    def get_data_source_stat_data_list(self) -> list[StatRecord]:
        return list(self.pools)

    def get_data_source_ids(self) -> list[Hashable]:
        return list(self.sql)

    def get_sql_stat_data_list(self, data_source: Hashable) -> list[StatRecord]:
        self.sql_calls.append(data_source)
        return list(self.sql.get(data_source, []))

    # -- test helpers --

    def clear(self) -> None:
        """Reset all recorded state."""
        self.pools.clear()
        self.sql.clear()
        self.sql_calls.clear()


class FakeWebAppStatFacade(WebAppStatFacade):
    """In-memory spy implementing the WebAppStatFacade protocol."""

    def __init__(self) -> None:
        self.uris: list[StatRecord] = []
        self.calls: int = 0

    def add_uri(self, record: StatRecord) -> None:
        self.uris.append(record)

    def get_uri_stat_data(self) -> list[StatRecord]:
        self.calls += 1
        return list(self.uris)
