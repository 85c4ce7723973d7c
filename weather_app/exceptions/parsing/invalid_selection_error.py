from weather_app.exceptions.parsing.parse_failure import ParseFailure


class InvalidSelectionError(ParseFailure):
    """Exception for an out of range or non-numeric disambiguation choice."""

    pass
