"""Protocols for the Druid statistics facades.

The collector only reads already-maintained counters through these; it
never reaches into the pool's own instrumentation.  Production wires the
host's stat managers behind them, tests inject in-memory fakes.
"""

from collections.abc import Hashable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

StatRecord = Mapping[str, Any]


@runtime_checkable
class DataSourceStatFacade(Protocol):
    """Read surface of the data-source statistics manager."""

    def get_data_source_stat_data_list(self) -> Sequence[StatRecord]:
        """Return one record per pool, keyed by CamelCase stat name."""
        ...

    def get_data_source_ids(self) -> Sequence[Hashable]:
        """Return the identities of every known data source."""
        ...

    def get_sql_stat_data_list(self, data_source: Hashable) -> Sequence[StatRecord]:
        """Return one record per distinct statement executed on *data_source*."""
        ...


@runtime_checkable
class WebAppStatFacade(Protocol):
    """Read surface of the web-request statistics manager."""

    def get_uri_stat_data(self) -> Sequence[StatRecord]:
        """Return one record per distinct request URI."""
        ...
