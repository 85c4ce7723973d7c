from weather_app.exceptions.http.accumulation_error import AccumulationError
from weather_app.exceptions.http.http_status_failure import HTTPStatusFailure
from weather_app.exceptions.http.redirect_loop_error import RedirectLoopError
from weather_app.exceptions.http.request_timeout_error import RequestTimeoutError
from weather_app.exceptions.http.transport_failure import TransportFailure

__all__ = [
    "AccumulationError",
    "HTTPStatusFailure",
    "RedirectLoopError",
    "RequestTimeoutError",
    "TransportFailure",
]
