"""Shared fixtures: synthetic Druid stat records and fake facades."""

from typing import Any

import pytest

from druid_exporter.adapters.stat_source import FakeDataSourceStatFacade, FakeWebAppStatFacade
from druid_exporter.core.fields import POOL_GROUP, SQL_GROUP, URI_GROUP, MetricKind, fields_for
from druid_exporter.core.stat_source import StatSourceAdapter

EMPTY_BUCKETS = [0, 0, 0, 0, 0, 0, 0]


def _defaults(group) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for row in fields_for(group):
        if row.kind is MetricKind.GAUGE:
            values[row.field] = 0
        elif row.kind is MetricKind.HISTOGRAM:
            values[row.field] = list(EMPTY_BUCKETS)
        else:
            values[row.field] = None
    return values


def make_pool_record(name: str = "p1", **overrides: Any) -> dict[str, Any]:
    """A pool record carrying every exported field, zeroed unless overridden."""
    return {"Name": name, **_defaults(POOL_GROUP), **overrides}


def make_sql_record(
    name: str = "p1", sql: str = "select 1 from dual", **overrides: Any
) -> dict[str, Any]:
    record = {
        "Name": name,
        "SQL": sql,
        "LastErrorClass": None,
        "LastErrorMessage": None,
        **_defaults(SQL_GROUP),
    }
    record.update(overrides)
    return record


def make_uri_record(uri: str = "/api/orders", **overrides: Any) -> dict[str, Any]:
    return {"URI": uri, **_defaults(URI_GROUP), **overrides}


@pytest.fixture
def data_sources() -> FakeDataSourceStatFacade:
    return FakeDataSourceStatFacade()


@pytest.fixture
def web_app() -> FakeWebAppStatFacade:
    return FakeWebAppStatFacade()


@pytest.fixture
def source(data_sources, web_app) -> StatSourceAdapter:
    return StatSourceAdapter(data_sources, web_app)
