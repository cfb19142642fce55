from typing import Optional

from pydantic import BaseModel, Field


class SetLocationRequest(BaseModel):
    location_name: Optional[str] = Field(None, alias="locationName")
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    radius: Optional[float] = None

    class Config:
        populate_by_name = True
