from weather_app.exceptions.http.transport_failure import TransportFailure


class RedirectLoopError(TransportFailure):
    """Exception for requests that exceeded the redirect limit."""

    pass
