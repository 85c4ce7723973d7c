from enum import Enum, IntEnum


class WorkflowState(str, Enum):
    """Stages of a single weather lookup."""

    START = "start"
    GEOCODE_REQUESTED = "geocode_requested"
    GEOCODE_PARSED = "geocode_parsed"
    WEATHER_REQUESTED = "weather_requested"
    WEATHER_PARSED = "weather_parsed"
    REPORTED = "reported"
    FAILED = "failed"


class ExitCode(IntEnum):
    """Process exit codes, one per failure class."""

    SUCCESS = 0
    USAGE = 1
    CONFIG = 2
    GEOCODE_TRANSPORT = 3
    GEOCODE_PARSE = 4
    WEATHER_TRANSPORT = 5
    WEATHER_PARSE = 6
