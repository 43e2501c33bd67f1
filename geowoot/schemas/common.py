from pydantic import BaseModel, ConfigDict, Field

class Reading(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    timestamp: str

class LocationUpdated(BaseModel):
    success: bool = True
    location: Reading

class LocationInfo(BaseModel):
    city: str = "Unknown"
    country: str = "Unknown"
