from weather_app.models.query.weather_query import MAX_CITY_LENGTH, WeatherQuery
from weather_app.models.query.workflow import ExitCode, WorkflowState

__all__ = ["MAX_CITY_LENGTH", "ExitCode", "WeatherQuery", "WorkflowState"]
