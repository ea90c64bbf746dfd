"""Label schemas for each metric shape.

Every schema is the static tag keys followed by the group's dimension
labels.  The dimension order here is the order in which
``druid_exporter.core.fields`` extracts the matching values from a stat
record, and the two must stay in step.
"""

from collections.abc import Iterable, Mapping
from enum import Enum

LE_LABEL = "le"


class LabelSchema(str, Enum):
    """Identifier of a label schema."""

    POOL = "pool"
    POOL_HISTOGRAM = "pool_histogram"
    SQL = "sql"
    SQL_HISTOGRAM = "sql_histogram"
    SQL_ERROR = "sql_error"
    URI = "uri"
    URI_HISTOGRAM = "uri_histogram"


DIMENSIONS: Mapping[LabelSchema, tuple[str, ...]] = {
    LabelSchema.POOL: ("pool",),
    LabelSchema.POOL_HISTOGRAM: ("pool", LE_LABEL),
    LabelSchema.SQL: ("pool", "sql"),
    LabelSchema.SQL_HISTOGRAM: ("pool", "sql", LE_LABEL),
    LabelSchema.SQL_ERROR: ("pool", "sql", "class", "message"),
    LabelSchema.URI: ("uri",),
    LabelSchema.URI_HISTOGRAM: ("uri", LE_LABEL),
}


def label_names(tag_keys: Iterable[str], schema: LabelSchema) -> list[str]:
    """Return the ordered label names for *schema*."""
    return [*tag_keys, *DIMENSIONS[schema]]


def build_label_schemas(tag_keys: Iterable[str]) -> dict[LabelSchema, list[str]]:
    """Compute every schema once for a fixed tag-key order."""
    keys = list(tag_keys)
    return {schema: label_names(keys, schema) for schema in LabelSchema}
