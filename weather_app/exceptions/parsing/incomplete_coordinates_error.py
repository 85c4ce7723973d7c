from weather_app.exceptions.parsing.parse_failure import ParseFailure


class IncompleteCoordinatesError(ParseFailure):
    """Exception for a selected location whose coordinates could not be resolved."""

    pass
