from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OpenMeteoCurrent(BaseModel):
    """Current conditions block of an Open-Meteo forecast response."""

    model_config = ConfigDict(extra="ignore")

    temperature_2m: Optional[float] = Field(None, description="Air temperature at 2 meters")
    relative_humidity_2m: Optional[int] = Field(
        None, description="Relative humidity at 2 meters in percent"
    )

    @field_validator("relative_humidity_2m", mode="before")
    def truncate_humidity(cls, v):
        """Truncate fractional humidity values to an integer percentage."""
        if isinstance(v, float):
            return int(v)
        return v


class OpenMeteoResponse(BaseModel):
    """Open-Meteo forecast response restricted to the fields we request."""

    model_config = ConfigDict(extra="ignore")

    latitude: Optional[float] = Field(None, description="Grid cell latitude")
    longitude: Optional[float] = Field(None, description="Grid cell longitude")
    current: OpenMeteoCurrent = Field(..., description="Current conditions")


class WeatherReading(BaseModel):
    """Temperature and humidity parsed from a weather response."""

    temperature: Optional[float] = Field(None, description="Temperature in Celsius")
    humidity: Optional[int] = Field(None, description="Relative humidity percentage")

    @classmethod
    def from_open_meteo_response(cls, response: OpenMeteoResponse) -> "WeatherReading":
        return cls(
            temperature=response.current.temperature_2m,
            humidity=response.current.relative_humidity_2m,
        )
