class IngestionError(Exception):
    """Base class for failures that leave the active dataset unchanged."""


class ConfigurationError(IngestionError):
    """Connector settings were rejected before any request was made."""


class RemoteError(IngestionError):
    """The remote endpoint could not be reached or answered with an error."""


class NoDataError(IngestionError):
    """The source produced no student records."""


class ChannelError(IngestionError):
    """Unknown channel, or a channel that has not been populated yet."""


class OperationInProgressError(IngestionError):
    """Another operation is already running on the same channel."""
