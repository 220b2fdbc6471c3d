"""Failures raised inside the upstream client.

None of these leave the client: each is turned into an ``UpstreamErr``
carrying ``str(exc)`` as the user-facing message.
"""


class WeatherServiceError(Exception):
    """Base class for upstream lookup failures."""


class ConfigurationError(WeatherServiceError):
    """Raised when the provider credential is not configured."""

    def __init__(self, message: str = "API key not configured"):
        super().__init__(message)


class UpstreamTransportError(WeatherServiceError):
    """Raised when the provider cannot be reached (DNS, connect, timeout)."""

    def __init__(self, message: str = "Network error: Unable to connect to weather service"):
        super().__init__(message)


class UpstreamStatusError(WeatherServiceError):
    """Raised for non-2xx responses; 403 is reported as an auth/quota problem."""

    def __init__(self, status_code: int):
        if status_code == 403:
            message = "Invalid API key or quota exceeded"
        else:
            message = f"Weather API error: {status_code}"
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(WeatherServiceError):
    """Raised when a 2xx body does not parse into the expected payload."""

    def __init__(self, message: str = "Invalid response from weather service"):
        super().__init__(message)
