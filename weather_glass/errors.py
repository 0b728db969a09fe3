# ABOUTME: Exception taxonomy for weather queries: configuration, validation, API, data shape, transport.
# ABOUTME: Each error carries a machine code and the message the UI shows in its error banner.

API_KEY_ENV = "WEATHERSTACK_API_KEY"

_VALIDATION_MESSAGES = {
    "empty-location": "Please enter a location.",
    "missing-historical-date": "Please choose a historical date.",
    "missing-marine-date": "Please choose a marine date.",
}


class WeatherGlassError(Exception):
    """Base class for every error surfaced by a weather query."""

    def __init__(self, code: str, message: str | None = None):
        self.code = code
        super().__init__(message or code)

    @property
    def user_message(self) -> str:
        return str(self)


class ConfigurationError(WeatherGlassError):
    """The API credential is missing; raised before any request is built."""

    def __init__(self, message: str | None = None):
        super().__init__("missing-api-key", message or f"{API_KEY_ENV} is not set")

    @property
    def user_message(self) -> str:
        return f"Missing API key. Please add {API_KEY_ENV} to a .env file."


class ValidationError(WeatherGlassError):
    """Caller input is unusable (empty location, missing date for the mode)."""

    def __init__(self, code: str):
        super().__init__(code)

    @property
    def user_message(self) -> str:
        return _VALIDATION_MESSAGES.get(self.code, "Invalid query.")


class ApiError(WeatherGlassError):
    """The service answered with a logical error payload. The message is the service's info text."""

    def __init__(self, message: str, info: str | None = None):
        self.info = info
        super().__init__("api-error", message)

    @property
    def user_message(self) -> str:
        return self.info or "API request failed."


class DataShapeError(WeatherGlassError):
    """The service reported success but the payload lacks a block we need."""

    @property
    def user_message(self) -> str:
        return "Unexpected response from the weather service."


class TransportError(WeatherGlassError):
    """Network failure or a body that is not JSON."""

    def __init__(self, message: str):
        super().__init__("transport-error", message or "Something went wrong.")
