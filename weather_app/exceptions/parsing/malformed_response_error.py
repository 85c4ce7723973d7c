from weather_app.exceptions.parsing.parse_failure import ParseFailure


class MalformedResponseError(ParseFailure):
    """Exception for bodies that are not JSON or lack a required field."""

    pass
