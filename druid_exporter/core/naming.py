"""Metric-name translation and label-value sanitizing.

Druid exposes its statistics under CamelCase keys (``NotEmptyWaitCount``);
Prometheus wants lowercase, underscore-separated names
(``druid_not_empty_wait_count``).
"""

import re

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")
_WHITESPACE_RUN = re.compile(r"\s+")

BUCKET_SUFFIX = "_bucket"


def snake_case(name: str) -> str:
    """Convert a CamelCase field name to snake_case.

    Only a lowercase letter followed by an uppercase letter starts a new
    word, so acronyms stay together: ``PSCacheHitCount`` becomes
    ``pscache_hit_count``.
    """
    return "_".join(part.lower() for part in _CAMEL_BOUNDARY.split(name) if part)


def metric_name(prefix: str, field: str, *, histogram: bool = False) -> str:
    """Build the exposed metric name for *field* under a group *prefix*."""
    name = prefix + snake_case(field)
    if histogram:
        name += BUCKET_SUFFIX
    return name


def sanitize_text(text: str) -> str:
    """Collapse every run of whitespace in *text* to a single space."""
    return _WHITESPACE_RUN.sub(" ", text)
