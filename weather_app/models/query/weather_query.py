from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from weather_app.models.query.workflow import WorkflowState

MAX_CITY_LENGTH = 31
NOT_AVAILABLE = "n/a"


class WeatherQuery(BaseModel):
    """
    Session record for one weather lookup.

    Mutated in place as each workflow stage completes. Coordinates are only
    meaningful once the geocode stage succeeded, temperature and humidity once
    the weather stage succeeded.
    """

    model_config = ConfigDict(validate_assignment=True)

    city: str = Field(..., description="Resolved place name, truncated to MAX_CITY_LENGTH")
    latitude: Optional[float] = Field(None, ge=-90, le=90, description="Latitude")
    longitude: Optional[float] = Field(None, ge=-180, le=180, description="Longitude")
    temperature: Optional[float] = Field(None, description="Temperature in Celsius")
    relative_humidity: Optional[int] = Field(None, description="Relative humidity percentage")
    last_error: Optional[str] = Field(None, description="Reason of the last failure")
    state: WorkflowState = Field(WorkflowState.START, description="Current workflow state")

    @field_validator("city", mode="before")
    def truncate_city(cls, v):
        if isinstance(v, str) and len(v) > MAX_CITY_LENGTH:
            return v[:MAX_CITY_LENGTH]
        return v

    def format_report(self) -> str:
        """Render the human readable weather report."""
        temperature = (
            f"{self.temperature:.1f} °C" if self.temperature is not None else NOT_AVAILABLE
        )
        humidity = (
            f"{self.relative_humidity:d} %" if self.relative_humidity is not None else NOT_AVAILABLE
        )

        lines = [
            "",
            f"Weather report for {self.city}:",
            f"  Coordinates: ({self.latitude:.4f}, {self.longitude:.4f})",
            f"  Temperature: {temperature}",
            f"  Humidity:    {humidity}",
        ]
        return "\n".join(lines)
