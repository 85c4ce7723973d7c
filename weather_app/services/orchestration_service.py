import sys
from typing import NoReturn, Optional, TextIO
from urllib.parse import quote

import structlog

from weather_app.config.config import get_config
from weather_app.exceptions.base import WeatherAppError
from weather_app.exceptions.cli import UsageError
from weather_app.exceptions.config import InvalidConfigError, MissingAPIKeyError
from weather_app.exceptions.http import TransportFailure
from weather_app.exceptions.orchestration import WorkflowError
from weather_app.exceptions.parsing import ParseFailure
from weather_app.models.query.weather_query import WeatherQuery
from weather_app.models.query.workflow import ExitCode, WorkflowState
from weather_app.services.geocode_service import GeocodeParser
from weather_app.services.http_fetcher import HttpFetcher
from weather_app.services.weather_service import WeatherParser

logger = structlog.get_logger(__name__)

WEATHER_VARIABLES = "temperature_2m,relative_humidity_2m"


def build_geocode_url(city: str, api_key: str, base_url: Optional[str] = None) -> str:
    """
    Build the Geoapify search URL for a place name.

    Raises:
        InvalidConfigError: If the place name or key cannot be URL-encoded
    """
    base_url = base_url or get_config().geoapify_base_url
    try:
        text = quote(city, safe="")
        key = quote(api_key, safe="")
    except (TypeError, UnicodeEncodeError) as e:
        raise InvalidConfigError(f"Failed to URL-encode city name: {str(e)}") from e
    return f"{base_url}/v1/geocode/search?text={text}&apiKey={key}"


def build_weather_url(latitude: float, longitude: float, base_url: Optional[str] = None) -> str:
    """Build the Open-Meteo current weather URL for a coordinate pair."""
    base_url = base_url or get_config().open_meteo_base_url
    return (
        f"{base_url}/v1/forecast?latitude={latitude:f}&longitude={longitude:f}"
        f"&current={WEATHER_VARIABLES}"
    )


class WeatherOrchestrator:
    """
    Runs one weather lookup from place name to report.

    The workflow is strictly sequential:
    start -> geocode_requested -> geocode_parsed -> weather_requested
    -> weather_parsed -> reported. Any failure moves the query to the failed
    state and raises WorkflowError with the exit code of that failure class.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        fetcher: Optional[HttpFetcher] = None,
        geocode_parser: Optional[GeocodeParser] = None,
        weather_parser: Optional[WeatherParser] = None,
        output: Optional[TextIO] = None,
    ):
        self.api_key = api_key
        self.output = output
        self.fetcher = fetcher or HttpFetcher(on_chunk=self._report_chunk)
        self.geocode_parser = geocode_parser or GeocodeParser(output=output)
        self.weather_parser = weather_parser or WeatherParser()

    def _print(self, text: str = "") -> None:
        print(text, file=self.output or sys.stdout)

    def _report_chunk(self, size: int) -> None:
        self._print(f"Received data chunk of size: {size} bytes")

    def _transition(self, query: WeatherQuery, state: WorkflowState) -> None:
        logger.debug("Workflow transition", city=query.city, from_state=query.state.value, to_state=state.value)
        query.state = state

    def _fail(
        self, query: WeatherQuery, stage: WorkflowState, error: WeatherAppError, exit_code: ExitCode
    ) -> NoReturn:
        reason = str(error)
        query.last_error = reason
        query.state = WorkflowState.FAILED
        logger.error("Weather lookup failed", city=query.city, stage=stage.value, error=reason)
        raise WorkflowError(stage.value, reason, int(exit_code)) from error

    def run(self, city: str) -> WeatherQuery:
        """
        Resolve a place name, fetch its current weather and print the report.

        Args:
            city: Free-text place name

        Returns:
            The completed WeatherQuery

        Raises:
            WorkflowError: If any stage fails
        """
        query = WeatherQuery(city=(city or "").strip())
        logger.info("Starting weather lookup", city=query.city)

        if not query.city:
            self._fail(query, WorkflowState.START, UsageError("City name is required"), ExitCode.USAGE)

        if not self.api_key:
            self._fail(
                query,
                WorkflowState.START,
                MissingAPIKeyError("Missing GEOAPIFY_API_KEY environment variable"),
                ExitCode.CONFIG,
            )

        self._resolve_location(query)
        self._resolve_weather(query)

        self._print(query.format_report())
        self._transition(query, WorkflowState.REPORTED)
        logger.info("Weather lookup completed", city=query.city)
        return query

    def _resolve_location(self, query: WeatherQuery) -> None:
        try:
            url = build_geocode_url(query.city, self.api_key)
        except InvalidConfigError as e:
            self._fail(query, WorkflowState.START, e, ExitCode.CONFIG)

        self._transition(query, WorkflowState.GEOCODE_REQUESTED)
        try:
            body = self.fetcher.get(url)
        except TransportFailure as e:
            self._fail(query, WorkflowState.GEOCODE_REQUESTED, e, ExitCode.GEOCODE_TRANSPORT)

        try:
            candidate = self.geocode_parser.parse(body)
        except ParseFailure as e:
            self._fail(query, WorkflowState.GEOCODE_PARSED, e, ExitCode.GEOCODE_PARSE)

        query.latitude = candidate.latitude
        query.longitude = candidate.longitude
        self._transition(query, WorkflowState.GEOCODE_PARSED)
        logger.info(
            "Resolved location",
            city=query.city,
            label=candidate.label,
            latitude=query.latitude,
            longitude=query.longitude,
        )

    def _resolve_weather(self, query: WeatherQuery) -> None:
        url = build_weather_url(query.latitude, query.longitude)

        self._transition(query, WorkflowState.WEATHER_REQUESTED)
        try:
            body = self.fetcher.get(url)
        except TransportFailure as e:
            self._fail(query, WorkflowState.WEATHER_REQUESTED, e, ExitCode.WEATHER_TRANSPORT)

        try:
            reading = self.weather_parser.parse(body)
        except ParseFailure as e:
            self._fail(query, WorkflowState.WEATHER_PARSED, e, ExitCode.WEATHER_PARSE)

        query.temperature = reading.temperature
        query.relative_humidity = reading.humidity
        self._transition(query, WorkflowState.WEATHER_PARSED)
