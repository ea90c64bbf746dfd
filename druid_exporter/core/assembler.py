"""Metric family assembler.

Turns a list of stat records into ``GaugeMetricFamily`` objects for one
field.  Three shapes exist, each generic over a ``StatGroup``:

* gauge: one sample per record,
* histogram: one sample per record and latency bucket,
* error gauge: one sample per record that has a recorded last error.

Histogram samples carry the raw count of each bucket under an ``le`` label.
They are NOT cumulative, even though the family name ends in ``_bucket``:
Druid reports per-range counts and they are exported as-is.

Any record that lacks a field, or carries a value of the wrong shape, raises
``StatContractError``.  Nothing is defaulted, so a broken stat source fails
the scrape instead of exporting misleading zeros.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime, timedelta, timezone
from numbers import Real
from typing import Any

from prometheus_client.core import GaugeMetricFamily

from druid_exporter.core.exceptions import StatContractError
from druid_exporter.core.fields import BUCKETS, SANITIZED_KEYS, StatGroup
from druid_exporter.core.labels import LabelSchema, build_label_schemas
from druid_exporter.core.naming import metric_name, sanitize_text
from druid_exporter.core.protocols.stat_source import StatRecord

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def _lookup(record: StatRecord, key: str) -> Any:
    try:
        return record[key]
    except KeyError:
        raise StatContractError(key, "missing from stat record") from None


def _number(record: StatRecord, field: str) -> float:
    value = _lookup(record, field)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise StatContractError(field, f"expected a number, got {type(value).__name__}")
    return float(value)


def _bucket_counts(record: StatRecord, field: str) -> Sequence[Real]:
    value = _lookup(record, field)
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise StatContractError(field, f"expected bucket counts, got {type(value).__name__}")
    for count in value:
        if isinstance(count, bool) or not isinstance(count, Real):
            raise StatContractError(field, f"non-numeric bucket count {count!r}")
    return value


def _epoch_millis(record: StatRecord, field: str) -> int | None:
    # An absent timestamp means no error was ever recorded.
    value = record.get(field)
    if value is None:
        return None
    if not isinstance(value, datetime):
        raise StatContractError(field, f"expected a datetime, got {type(value).__name__}")
    # Naive datetimes are taken as local time, like datetime.timestamp().
    if value.tzinfo is None:
        value = value.astimezone(timezone.utc)
    return (value - _EPOCH) // _ONE_MILLISECOND


def _dimension_values(record: StatRecord, keys: Iterable[str]) -> list[str]:
    values = []
    for key in keys:
        value = _lookup(record, key)
        text = "" if value is None else str(value)
        if key in SANITIZED_KEYS:
            text = sanitize_text(text)
        values.append(text)
    return values


class MetricFamilyAssembler:
    """Builds metric families for a fixed static tag set.

    Label schemas are computed once here and reused for every scrape.
    """

    def __init__(self, tags: Mapping[str, str]) -> None:
        self._tag_values = list(tags.values())
        self._schemas = build_label_schemas(tags.keys())

    def label_names(self, schema: LabelSchema) -> list[str]:
        return list(self._schemas[schema])

    def build_gauge(
        self,
        group: StatGroup,
        field: str,
        records: Sequence[StatRecord],
    ) -> GaugeMetricFamily:
        family = GaugeMetricFamily(
            metric_name(group.prefix, field),
            f"{group.help_prefix} {field}",
            labels=self._schemas[group.gauge_schema],
        )
        for record in records:
            labels = self._tag_values + _dimension_values(record, group.dimension_keys)
            family.add_metric(labels, _number(record, field))
        return family

    def build_histogram(
        self,
        group: StatGroup,
        field: str,
        records: Sequence[StatRecord],
    ) -> GaugeMetricFamily:
        """Emit one sample per bucket, at most ``len(BUCKETS)`` per record."""
        family = GaugeMetricFamily(
            metric_name(group.prefix, field, histogram=True),
            f"{group.help_prefix} {field}",
            labels=self._schemas[group.histogram_schema],
        )
        for record in records:
            counts = _bucket_counts(record, field)
            dimensions = self._tag_values + _dimension_values(record, group.dimension_keys)
            for le, count in zip(BUCKETS, counts):
                family.add_metric([*dimensions, le], float(count))
        return family

    def build_error_gauge(
        self,
        group: StatGroup,
        field: str,
        records: Sequence[StatRecord],
    ) -> GaugeMetricFamily:
        """Emit the last-error time in epoch milliseconds.

        Records without a recorded error are skipped rather than exported
        as zero.
        """
        if group.error_schema is None:
            raise ValueError(f"Stat group '{group.key}' has no error gauge.")

        family = GaugeMetricFamily(
            metric_name(group.prefix, field),
            f"{group.help_prefix} {field}",
            labels=self._schemas[group.error_schema],
        )
        for record in records:
            millis = _epoch_millis(record, field)
            if millis is None:
                continue
            labels = self._tag_values + _dimension_values(record, group.error_dimension_keys)
            family.add_metric(labels, float(millis))
        return family
