from weather_app.exceptions.base import WeatherAppError

__all__ = ["WeatherAppError"]
