class WeatherAppError(Exception):
    """Base exception for all weather app errors."""

    pass
