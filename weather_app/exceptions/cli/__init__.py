from weather_app.exceptions.cli.usage_error import UsageError

__all__ = ["UsageError"]
