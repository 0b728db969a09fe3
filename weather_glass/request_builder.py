# ABOUTME: Builds the weatherstack endpoint and query parameters for a query mode.
# ABOUTME: Pure and network-free; validates caller input before anything is sent.

from weather_glass.errors import ConfigurationError, ValidationError
from weather_glass.models import ApiRequest, QueryInput, QueryMode

_MISSING_DATE_CODES = {
    QueryMode.HISTORICAL: "missing-historical-date",
    QueryMode.MARINE: "missing-marine-date",
}


class RequestBuilder:
    """Turns a (mode, QueryInput) pair into an ApiRequest.

    The access key is injected at construction so the builder never reads process state.
    """

    def __init__(self, access_key: str):
        if not access_key or not access_key.strip():
            raise ConfigurationError()
        self._access_key = access_key

    def build(self, mode: QueryMode, query: QueryInput) -> ApiRequest:
        """Select the endpoint for the mode and assemble its parameters in a fixed order.

        Raises ValidationError for an empty location or a missing date for the mode.
        """
        mode = QueryMode(mode)
        location = query.location.strip()
        if not location:
            raise ValidationError("empty-location")

        parameters = {
            "access_key": self._access_key,
            "query": location,
            "units": query.units,
        }

        if mode is QueryMode.CURRENT:
            return ApiRequest(endpoint="/current", parameters=parameters)

        requested_date = query.date_for(mode)
        if not requested_date:
            raise ValidationError(_MISSING_DATE_CODES[mode])

        parameters["historical_date"] = requested_date
        parameters["hourly"] = "1"
        if mode is QueryMode.MARINE:
            parameters["tide"] = "1"
        return ApiRequest(endpoint="/historical", parameters=parameters)


def query_input_from_params(mode: QueryMode, parameters: dict[str, str]) -> QueryInput:
    """Recover the QueryInput a request was built from."""
    mode = QueryMode(mode)
    requested_date = parameters.get("historical_date")
    return QueryInput(
        location=parameters["query"],
        units=parameters.get("units", "m"),
        historical_date=requested_date if mode is QueryMode.HISTORICAL else None,
        marine_date=requested_date if mode is QueryMode.MARINE else None,
    )
