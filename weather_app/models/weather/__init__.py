from weather_app.models.weather.weather import OpenMeteoResponse, WeatherReading

__all__ = ["OpenMeteoResponse", "WeatherReading"]
