from weather_app.exceptions.config.api_key_error import MissingAPIKeyError
from weather_app.exceptions.config.config_error import ConfigError
from weather_app.exceptions.config.invalid_config_error import InvalidConfigError

__all__ = ["ConfigError", "InvalidConfigError", "MissingAPIKeyError"]
