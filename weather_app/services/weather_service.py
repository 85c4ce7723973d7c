import structlog
from pydantic import ValidationError

from weather_app.exceptions.parsing import MalformedResponseError
from weather_app.models.weather.weather import OpenMeteoResponse, WeatherReading

logger = structlog.get_logger(__name__)


class WeatherParser:
    """Parser for Open-Meteo current weather responses."""

    def parse(self, body: bytes) -> WeatherReading:
        """
        Parse temperature and humidity from a weather response.

        Missing temperature_2m or relative_humidity_2m fields are left unset;
        only malformed JSON or a missing current block is an error.

        Args:
            body: Raw response body

        Returns:
            WeatherReading with whichever fields were present

        Raises:
            MalformedResponseError: If the body is not JSON or lacks current
        """
        try:
            response = OpenMeteoResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error("Failed to parse weather data", error=str(e))
            raise MalformedResponseError(f"Invalid weather data received: {e.error_count()} error(s)")

        reading = WeatherReading.from_open_meteo_response(response)
        logger.info(
            "Parsed current weather",
            temperature=reading.temperature,
            humidity=reading.humidity,
        )
        return reading
