"""Exporter settings.

Static tags and group enable flags are read from the environment (prefix
``DRUID_METRICS_``) or passed explicitly.  Both mappings are JSON-encoded
when set through the environment, e.g.::

    DRUID_METRICS_TAGS='{"env": "prod", "app": "billing"}'
    DRUID_METRICS_ENABLE='{"druid-uri": false}'
"""

import re
from collections.abc import Mapping

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from druid_exporter.core.exceptions import ConfigurationError

# Enable-map keys for each stat group.
DRUID_KEY = "druid"
DRUID_SQL_KEY = "druid-sql"
DRUID_URI_KEY = "druid-uri"

# Dimension label names owned by the collector; a static tag may not reuse them.
RESERVED_LABELS = frozenset({"pool", "sql", "le", "class", "message", "uri"})

_LABEL_NAME_RE = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")


def validate_tags(tags: Mapping[str, str] | None) -> dict[str, str]:
    """Check that *tags* can be used as static labels on every sample.

    Raises:
        ConfigurationError: on an invalid or reserved label name, or a
            non-string value.
    """
    if tags is None:
        raise ConfigurationError("Tag set is missing.")
    if not isinstance(tags, Mapping):
        raise ConfigurationError(f"Tag set must be a mapping, got {type(tags).__name__}.")

    for key, value in tags.items():
        if not isinstance(key, str) or not _LABEL_NAME_RE.match(key) or key.startswith("__"):
            raise ConfigurationError(f"Invalid tag name {key!r}.")
        if key in RESERVED_LABELS:
            raise ConfigurationError(f"Tag name {key!r} collides with a collector label.")
        if not isinstance(value, str):
            raise ConfigurationError(f"Tag {key!r} must have a string value, got {value!r}.")
    return dict(tags)


class MetricsSettings(BaseSettings):
    """Settings for the Druid Prometheus collector."""

    model_config = SettingsConfigDict(env_prefix="DRUID_METRICS_")

    tags: dict[str, str] = Field(default_factory=dict)
    enable: dict[str, bool] = Field(default_factory=dict)

    @field_validator("tags")
    @classmethod
    def _check_tags(cls, value: dict[str, str]) -> dict[str, str]:
        try:
            return validate_tags(value)
        except ConfigurationError as e:
            # pydantic only wraps ValueError into a ValidationError
            raise ValueError(str(e)) from e

    def is_enabled(self, key: str) -> bool:
        """Return the flag for *key*; groups are enabled unless switched off."""
        return self.enable.get(key, True)
