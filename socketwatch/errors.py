"""Exception taxonomy for the poller.

Every recoverable error is caught at the smallest unit of work it concerns
(one page, one batch, one NDJSON line, one notification).  Only
:class:`SchedulerFatalError` is allowed to end the process.
"""


class SocketWatchError(Exception):
    """Base poller exception."""


class ConfigError(SocketWatchError, ValueError):
    """Invalid or missing configuration."""


class UpstreamError(SocketWatchError):
    """A request to the Socket API failed."""


class PageFetchError(UpstreamError):
    """One inventory page could not be fetched."""

    def __init__(self, offset: int, reason: str) -> None:
        self.offset = offset
        super().__init__(f"dependency page at offset {offset} failed: {reason}")


class BatchLookupError(UpstreamError):
    """One batched PURL lookup failed."""

    def __init__(self, size: int, reason: str) -> None:
        self.size = size
        super().__init__(f"lookup of {size} packages failed: {reason}")


class LineParseError(SocketWatchError):
    """A single NDJSON line in a lookup response was malformed."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        super().__init__(f"malformed package line: {reason}")


class NotificationDeliveryError(SocketWatchError):
    """The notification sink rejected a message or was unreachable."""


class SchedulerFatalError(SocketWatchError):
    """An error escaped the poll loop; the process must exit."""
