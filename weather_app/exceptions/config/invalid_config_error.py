from weather_app.exceptions.config.config_error import ConfigError


class InvalidConfigError(ConfigError):
    """Exception for settings that cannot be used to build a request."""

    pass
