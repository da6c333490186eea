"""Error taxonomy surfaced by the fetch, aggregation and search layers."""


class SkycastError(Exception):
    """Base class for all skycast errors."""


class ConfigurationError(SkycastError):
    """Required credential or setting is missing. Retrying cannot help."""


class InputError(SkycastError):
    """Caller supplied neither coordinates nor a city name."""


class UpstreamError(SkycastError):
    """Network failure or non-success response from the provider."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PartialDataError(UpstreamError):
    """One of the two concurrent weather fetches failed."""
