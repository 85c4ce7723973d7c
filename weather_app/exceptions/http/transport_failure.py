from weather_app.exceptions.base import WeatherAppError


class TransportFailure(WeatherAppError):
    """Base exception for errors while exchanging a request and response."""

    pass
