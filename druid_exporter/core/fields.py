"""Declarative table of the Druid statistics exported as metrics.

One row per exported field: which stat group it belongs to and how it is
rendered (plain gauge, per-bucket histogram, or last-error gauge).  The
collector walks this table in order on every scrape.
"""

from dataclasses import dataclass
from enum import Enum

from druid_exporter.core.labels import LabelSchema

# Latency bucket labels, applied positionally to Druid's histogram arrays.
BUCKETS: tuple[str, ...] = ("1ms", "10ms", "100ms", "1s", "10s", "100s", "Inf")

# Record keys carrying dimension values.
NAME_KEY = "Name"
SQL_KEY = "SQL"
URI_KEY = "URI"
LAST_ERROR_CLASS_KEY = "LastErrorClass"
LAST_ERROR_MESSAGE_KEY = "LastErrorMessage"

SQL_LAST_ERROR_TIME = "LastErrorTime"


class MetricKind(str, Enum):
    """How a field is rendered into a metric family."""

    GAUGE = "gauge"
    HISTOGRAM = "histogram"
    ERROR_GAUGE = "error_gauge"


@dataclass(frozen=True)
class StatGroup:
    """Naming and labelling rules shared by every metric of one stat group."""

    key: str
    prefix: str
    help_prefix: str
    gauge_schema: LabelSchema
    histogram_schema: LabelSchema
    dimension_keys: tuple[str, ...]
    error_schema: LabelSchema | None = None
    error_dimension_keys: tuple[str, ...] = ()


POOL_GROUP = StatGroup(
    key="pool",
    prefix="druid_",
    help_prefix="Druid",
    gauge_schema=LabelSchema.POOL,
    histogram_schema=LabelSchema.POOL_HISTOGRAM,
    dimension_keys=(NAME_KEY,),
)

SQL_GROUP = StatGroup(
    key="sql",
    prefix="druid_sql_",
    help_prefix="Druid SQL",
    gauge_schema=LabelSchema.SQL,
    histogram_schema=LabelSchema.SQL_HISTOGRAM,
    dimension_keys=(NAME_KEY, SQL_KEY),
    error_schema=LabelSchema.SQL_ERROR,
    error_dimension_keys=(NAME_KEY, SQL_KEY, LAST_ERROR_CLASS_KEY, LAST_ERROR_MESSAGE_KEY),
)

URI_GROUP = StatGroup(
    key="uri",
    prefix="druid_uri_",
    help_prefix="Druid URI",
    gauge_schema=LabelSchema.URI,
    histogram_schema=LabelSchema.URI_HISTOGRAM,
    dimension_keys=(URI_KEY,),
)

# Dimension values that hold free text and must be whitespace-collapsed.
SANITIZED_KEYS = frozenset({SQL_KEY})


@dataclass(frozen=True)
class MetricField:
    """One exported Druid statistic."""

    field: str
    group: StatGroup
    kind: MetricKind


def _rows(group: StatGroup, kind: MetricKind, *names: str) -> tuple[MetricField, ...]:
    return tuple(MetricField(name, group, kind) for name in names)


METRIC_FIELDS: tuple[MetricField, ...] = (
    *_rows(
        POOL_GROUP,
        MetricKind.GAUGE,
        "WaitThreadCount",
        "NotEmptyWaitCount",
        "NotEmptyWaitMillis",
        "PoolingCount",
        "PoolingPeak",
        "ActiveCount",
        "ActivePeak",
        "InitialSize",
        "MinIdle",
        "MaxActive",
        "QueryTimeout",
        "TransactionQueryTimeout",
        "LoginTimeout",
        "LogicConnectCount",
        "LogicCloseCount",
        "LogicConnectErrorCount",
        "PhysicalConnectCount",
        "PhysicalCloseCount",
        "PhysicalConnectErrorCount",
        "ExecuteCount",
        "ErrorCount",
        "CommitCount",
        "RollbackCount",
        "PSCacheAccessCount",
        "PSCacheHitCount",
        "PSCacheMissCount",
        "StartTransactionCount",
        "ClobOpenCount",
        "BlobOpenCount",
        "KeepAliveCheckCount",
        "MaxWait",
        "MaxWaitThreadCount",
        "MaxPoolPreparedStatementPerConnectionSize",
        "RecycleErrorCount",
        "PreparedStatementOpenCount",
        "PreparedStatementClosedCount",
        "ExecuteUpdateCount",
        "ExecuteQueryCount",
        "ExecuteBatchCount",
    ),
    *_rows(
        POOL_GROUP,
        MetricKind.HISTOGRAM,
        "TransactionHistogram",
        "ConnectionHoldTimeHistogram",
    ),
    *_rows(
        SQL_GROUP,
        MetricKind.GAUGE,
        "ExecuteCount",
        "FetchRowCount",
        "TotalTime",
        "MaxTimespan",
        "RunningCount",
        "ErrorCount",
        "ConcurrentMax",
    ),
    *_rows(
        SQL_GROUP,
        MetricKind.HISTOGRAM,
        "Histogram",
        "FetchRowCountHistogram",
        "EffectedRowCountHistogram",
        "ExecuteAndResultHoldTimeHistogram",
    ),
    *_rows(SQL_GROUP, MetricKind.ERROR_GAUGE, SQL_LAST_ERROR_TIME),
    *_rows(
        URI_GROUP,
        MetricKind.GAUGE,
        "RequestCount",
        "RequestTimeMillisMax",
        "RequestTimeMillis",
        "RunningCount",
        "ConcurrentMax",
        "JdbcExecuteTimeMillis",
        "JdbcExecuteCount",
        "JdbcExecuteErrorCount",
    ),
    *_rows(URI_GROUP, MetricKind.HISTOGRAM, "Histogram"),
)


def fields_for(group: StatGroup) -> tuple[MetricField, ...]:
    """Return the table rows of *group*, in table order."""
    return tuple(f for f in METRIC_FIELDS if f.group is group)
