from weather_app.exceptions.parsing.parse_failure import ParseFailure


class NoResultsError(ParseFailure):
    """Exception for geocoding responses without any matching location."""

    pass
