from weather_app.exceptions.config.config_error import ConfigError


class MissingAPIKeyError(ConfigError):
    """Exception for a missing or empty Geoapify API key."""

    pass
