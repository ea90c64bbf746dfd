"""ScrapeRenderer protocol for answering a scrape of the Druid metrics.

The host's HTTP handler depends on this rather than on prometheus-client:
it asks for one serialized snapshot per scrape and maps
``ScrapeFailedError`` to a failed response.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScrapeRenderer(Protocol):
    """Protocol for serializing one complete Druid snapshot per scrape."""

    @property
    def content_type(self) -> str:
        """MIME type of the payload returned by ``render()``."""
        ...

    @property
    def failed_scrapes(self) -> int:
        """Number of scrapes that raised instead of producing a payload."""
        ...

    def render(self) -> bytes:
        """Collect and serialize the current snapshot.

        Raises:
            ScrapeFailedError: when the snapshot could not be built; no
                partial payload is ever returned.
        """
        ...
