from weather_app.exceptions.http.transport_failure import TransportFailure


class HTTPStatusFailure(TransportFailure):
    """Exception for non-2xx responses."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code
