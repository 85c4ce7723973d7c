from weather_app.exceptions.base import WeatherAppError


class WorkflowError(WeatherAppError):
    """Exception raised when a workflow stage fails.

    Carries the stage that failed, a human readable reason and the process
    exit code reserved for that class of failure.
    """

    def __init__(self, stage: str, reason: str, exit_code: int):
        super().__init__(reason)
        self.stage = stage
        self.reason = reason
        self.exit_code = exit_code
