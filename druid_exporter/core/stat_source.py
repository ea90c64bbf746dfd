"""Stat source adapter.

Pulls the current record lists from the injected facades.  Statement and
endpoint records are only fetched when their group is enabled, so a
disabled group costs nothing on the scrape path.
"""

from druid_exporter.core.protocols.stat_source import (
    DataSourceStatFacade,
    StatRecord,
    WebAppStatFacade,
)


class StatSourceAdapter:
    """Read-only handle over the data-source and web-app stat facades."""

    def __init__(
        self,
        data_sources: DataSourceStatFacade,
        web_app: WebAppStatFacade | None = None,
    ) -> None:
        self._data_sources = data_sources
        self._web_app = web_app

    def pool_records(self) -> list[StatRecord]:
        return list(self._data_sources.get_data_source_stat_data_list())

    def sql_records(self, enabled: bool) -> list[StatRecord]:
        """Statement records flattened across every known data source."""
        if not enabled:
            return []
        records: list[StatRecord] = []
        for data_source in self._data_sources.get_data_source_ids():
            records.extend(self._data_sources.get_sql_stat_data_list(data_source))
        return records

    def uri_records(self, enabled: bool) -> list[StatRecord]:
        if not enabled or self._web_app is None:
            return []
        return list(self._web_app.get_uri_stat_data())
