from weather_app.exceptions.http.transport_failure import TransportFailure


class RequestTimeoutError(TransportFailure):
    """Exception for requests that did not complete within the timeout."""

    pass
