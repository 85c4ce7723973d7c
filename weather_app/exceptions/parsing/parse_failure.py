from weather_app.exceptions.base import WeatherAppError


class ParseFailure(WeatherAppError):
    """Base exception for errors interpreting a received response body."""

    pass
