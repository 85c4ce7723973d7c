from weather_app.exceptions.base import WeatherAppError


class ConfigError(WeatherAppError):
    """Base exception for configuration errors."""

    pass
