from weather_app.exceptions.base import WeatherAppError


class UsageError(WeatherAppError):
    """Exception for bad command line input."""

    pass
