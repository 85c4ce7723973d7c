from weather_app.models.geocode.geocode import (
    GeoapifyFeature,
    GeoapifyResponse,
    GeocodeCandidate,
)

__all__ = ["GeoapifyFeature", "GeoapifyResponse", "GeocodeCandidate"]
