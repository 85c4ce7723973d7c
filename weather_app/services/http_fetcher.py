import time
from typing import Callable, Optional

import httpx
import structlog

from weather_app.config.config import get_config
from weather_app.exceptions.http import (
    AccumulationError,
    HTTPStatusFailure,
    RedirectLoopError,
    RequestTimeoutError,
    TransportFailure,
)
from weather_app.services.response_accumulator import ResponseAccumulator

logger = structlog.get_logger(__name__)


def redact_url(url: str) -> str:
    """Return the URL without its query string, for logs and messages."""
    return str(httpx.URL(url).copy_with(query=None))


class HttpFetcher:
    """
    Issues blocking GET requests with a fixed policy.

    Every request follows redirects, is bounded by an absolute timeout and
    identifies itself with the configured user agent. A fresh client is built
    per request so a failed request cannot affect a later one.
    """

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        user_agent: Optional[str] = None,
        on_chunk: Optional[Callable[[int], None]] = None,
        transport: Optional[httpx.BaseTransport] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.timeout_seconds = timeout_seconds or get_config().http_timeout_seconds
        self.user_agent = user_agent or get_config().user_agent
        self.on_chunk = on_chunk
        self.transport = transport
        self.clock = clock

    def _create_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout_seconds),
            follow_redirects=True,
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
        )

    def _check_deadline(self, deadline: float) -> None:
        if self.clock() > deadline:
            raise RequestTimeoutError(
                f"Request timed out after {self.timeout_seconds:g} seconds"
            )

    def get(self, url: str) -> bytes:
        """
        Fetch a URL and return the complete response body.

        The deadline is checked once the response headers arrive and again
        after every body chunk, so a request ends at most one httpx operation
        timeout past it.

        Args:
            url: Fully built request URL

        Returns:
            Response body, owned by the caller

        Raises:
            RequestTimeoutError: If the request did not complete in time
            HTTPStatusFailure: If the server answered with a non-2xx status
            RedirectLoopError: If the redirect limit was exceeded
            AccumulationError: If a chunk could not be stored
            TransportFailure: For any other network error
        """
        deadline = self.clock() + self.timeout_seconds
        # Query strings carry the API key
        endpoint = redact_url(url)
        logger.info("Making API request", url=endpoint, timeout=self.timeout_seconds)

        with ResponseAccumulator(on_chunk=self.on_chunk) as accumulator:
            try:
                with self._create_client() as client:
                    with client.stream("GET", url) as response:
                        response.raise_for_status()
                        self._check_deadline(deadline)

                        for chunk in response.iter_bytes():
                            self._check_deadline(deadline)
                            if accumulator.append(chunk) != len(chunk):
                                raise AccumulationError(
                                    f"Failed to store response chunk of {len(chunk)} bytes"
                                )

            except httpx.TimeoutException as e:
                logger.warning("Request timeout", url=endpoint, error=type(e).__name__)
                raise RequestTimeoutError(
                    f"Request timed out after {self.timeout_seconds:g} seconds"
                ) from e

            except httpx.HTTPStatusError as e:
                status_code = e.response.status_code
                logger.warning("API request failed", url=endpoint, status_code=status_code)
                raise HTTPStatusFailure(
                    f"HTTP {status_code} returned by {e.request.url.host}", status_code
                ) from e

            except httpx.TooManyRedirects as e:
                logger.warning("Too many redirects", url=endpoint)
                raise RedirectLoopError(f"Too many redirects for {endpoint}") from e

            except httpx.HTTPError as e:
                logger.warning("Request error", url=endpoint, error=str(e))
                raise TransportFailure(f"Request failed: {str(e)}") from e

            except TransportFailure as e:
                logger.warning("Request aborted", url=endpoint, error=str(e))
                raise

            body = accumulator.take()

        logger.info("Request completed", url=endpoint, size=len(body))
        return body
