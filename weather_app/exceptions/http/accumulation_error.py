from weather_app.exceptions.http.transport_failure import TransportFailure


class AccumulationError(TransportFailure):
    """Exception for response chunks the accumulator could not store."""

    pass
