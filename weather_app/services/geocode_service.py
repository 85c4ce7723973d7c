import sys
from typing import Callable, List, Optional, TextIO

import structlog
from pydantic import ValidationError

from weather_app.exceptions.parsing import (
    IncompleteCoordinatesError,
    InvalidSelectionError,
    MalformedResponseError,
    NoResultsError,
)
from weather_app.models.geocode.geocode import GeoapifyResponse, GeocodeCandidate

logger = structlog.get_logger(__name__)


class GeocodeParser:
    """
    Parser for Geoapify geocoding responses.

    Turns a response body into an ordered list of candidates and picks one,
    asking the operator to choose when the place name is ambiguous.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.input_func = input_func
        self.output = output

    def _print(self, text: str = "") -> None:
        print(text, file=self.output or sys.stdout)

    def parse_candidates(self, body: bytes) -> List[GeocodeCandidate]:
        """
        Parse a geocoding response into candidates.

        Args:
            body: Raw response body

        Returns:
            Candidates in response order

        Raises:
            MalformedResponseError: If the body is not JSON or lacks features
            NoResultsError: If the response contains no matches
        """
        try:
            response = GeoapifyResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error("Failed to parse geocoding data", error=str(e))
            raise MalformedResponseError(f"Invalid geocoding data received: {e.error_count()} error(s)")

        if not response.features:
            logger.info("Geocoding returned no results")
            raise NoResultsError("No location found (no results)")

        candidates = [GeocodeCandidate.from_feature(f) for f in response.features]

        logger.info("Parsed geocoding candidates", count=len(candidates))
        return candidates

    def select_candidate(self, candidates: List[GeocodeCandidate]) -> GeocodeCandidate:
        """
        Pick one candidate, prompting the operator when there is more than one.

        Args:
            candidates: Non-empty list of candidates

        Returns:
            The selected candidate

        Raises:
            NoResultsError: If candidates is empty
            InvalidSelectionError: If the operator's choice is not in [1, count]
            IncompleteCoordinatesError: If the selected candidate has no coordinates
        """
        if not candidates:
            raise NoResultsError("No location found (no results)")

        if len(candidates) == 1:
            selected = candidates[0]
            self._print(f"Found location: {selected.label}")
        else:
            selected = candidates[self._prompt_for_index(candidates) - 1]
            self._print(f"Selected location: {selected.label}")

        if not selected.has_coordinates:
            logger.warning("Selected location has no coordinates", label=selected.label)
            raise IncompleteCoordinatesError(
                f"Could not resolve coordinates for {selected.label!r}"
            )

        return selected

    def _prompt_for_index(self, candidates: List[GeocodeCandidate]) -> int:
        self._print(f"Multiple locations found ({len(candidates)}):")
        for index, candidate in enumerate(candidates, start=1):
            self._print(f"  {index}. {candidate.label}")

        try:
            answer = self.input_func(f"Select a location [1-{len(candidates)}]: ")
        except EOFError:
            raise InvalidSelectionError("Invalid selection: no input")

        try:
            index = int(answer.strip())
        except ValueError:
            raise InvalidSelectionError(f"Invalid selection: {answer.strip()!r}")

        if not 1 <= index <= len(candidates):
            raise InvalidSelectionError(f"Invalid selection: {index}")

        logger.info("Location selected", index=index, count=len(candidates))
        return index

    def parse(self, body: bytes) -> GeocodeCandidate:
        """Parse a geocoding response and resolve it to a single candidate."""
        return self.select_candidate(self.parse_candidates(body))
