"""Exceptions raised by the stat-to-metric translation engine."""


class DruidExporterError(Exception):
    """Base class for all exporter errors."""


class ConfigurationError(DruidExporterError):
    """Raised at construction time when the tag set is malformed.

    The collector is never created when this is raised, so no scrape can
    run against a half-configured engine.
    """


class StatContractError(DruidExporterError):
    """A stat record is missing a field or carries a value of the wrong shape.

    Fatal for the current scrape: ``collect()`` fails as a whole instead of
    emitting zeros or dropping the metric.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Stat field '{field}': {message}")
        self.field = field


class ScrapeFailedError(DruidExporterError):
    """A scrape could not produce a complete snapshot.

    Raised by the exposition layer in place of an empty or partial payload,
    so the host can answer the scrape with a failure status.
    """
