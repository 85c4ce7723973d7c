from weather_app.exceptions.parsing.incomplete_coordinates_error import (
    IncompleteCoordinatesError,
)
from weather_app.exceptions.parsing.invalid_selection_error import InvalidSelectionError
from weather_app.exceptions.parsing.malformed_response_error import MalformedResponseError
from weather_app.exceptions.parsing.no_results_error import NoResultsError
from weather_app.exceptions.parsing.parse_failure import ParseFailure

__all__ = [
    "IncompleteCoordinatesError",
    "InvalidSelectionError",
    "MalformedResponseError",
    "NoResultsError",
    "ParseFailure",
]
