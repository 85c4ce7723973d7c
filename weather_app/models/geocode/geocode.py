from numbers import Real
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_LOCATION_LABEL = "Unknown location"


def _in_range(latitude: float, longitude: float) -> bool:
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


class FeatureProperties(BaseModel):
    """Properties block of a Geoapify feature."""

    model_config = ConfigDict(extra="ignore")

    lat: Optional[float] = Field(None, description="Latitude")
    lon: Optional[float] = Field(None, description="Longitude")
    formatted: Optional[str] = Field(None, description="Formatted address of the match")
    name: Optional[str] = Field(None, description="Short name of the match")


class FeatureGeometry(BaseModel):
    """GeoJSON geometry of a Geoapify feature."""

    model_config = ConfigDict(extra="ignore")

    type: Optional[str] = Field(None, description="GeoJSON geometry type")
    coordinates: Optional[List[Any]] = Field(
        None, description="Coordinates, [longitude, latitude] for points"
    )


class GeoapifyFeature(BaseModel):
    """A single geocoding match."""

    model_config = ConfigDict(extra="ignore")

    properties: Optional[FeatureProperties] = Field(None, description="Match properties")
    geometry: Optional[FeatureGeometry] = Field(None, description="Match geometry")

    def flat_coordinates(self) -> Optional[Tuple[float, float]]:
        """Return (lat, lon) from properties.lat/properties.lon when both are present."""
        if self.properties is None:
            return None
        if self.properties.lat is None or self.properties.lon is None:
            return None
        return self.properties.lat, self.properties.lon

    def geometry_coordinates(self) -> Optional[Tuple[float, float]]:
        """Return (lat, lon) from a [longitude, latitude] geometry.coordinates array."""
        if self.geometry is None or not self.geometry.coordinates:
            return None

        coords = self.geometry.coordinates
        if len(coords) < 2:
            return None

        lon, lat = coords[0], coords[1]
        # Nested arrays (lines, polygons) carry no single point
        for value in (lon, lat):
            if isinstance(value, bool) or not isinstance(value, Real):
                return None
        return float(lat), float(lon)


class GeoapifyResponse(BaseModel):
    """Geoapify geocoding search response."""

    model_config = ConfigDict(extra="ignore")

    features: List[GeoapifyFeature] = Field(..., description="Geocoding matches")


class GeocodeCandidate(BaseModel):
    """A named place match with its resolved coordinates, if any."""

    label: str = Field(..., description="Display label of the match")
    latitude: Optional[float] = Field(None, ge=-90, le=90, description="Latitude")
    longitude: Optional[float] = Field(None, ge=-180, le=180, description="Longitude")

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def from_feature(cls, feature: GeoapifyFeature) -> "GeocodeCandidate":
        """
        Create a GeocodeCandidate from a Geoapify feature.

        The flat properties.lat/properties.lon pair is tried first, then the
        geometry.coordinates array. The first shape that yields both values
        within range wins; otherwise the coordinates are left unset.

        Args:
            feature: Geoapify feature

        Returns:
            GeocodeCandidate: Candidate for selection
        """
        properties = feature.properties
        label = UNKNOWN_LOCATION_LABEL
        if properties is not None:
            label = properties.formatted or properties.name or UNKNOWN_LOCATION_LABEL

        for coordinates in (feature.flat_coordinates(), feature.geometry_coordinates()):
            if coordinates is not None and _in_range(*coordinates):
                latitude, longitude = coordinates
                return cls(label=label, latitude=latitude, longitude=longitude)

        return cls(label=label)
