from typing import Optional

from pydantic import BaseModel, Field


class AttendanceRequest(BaseModel):
    user_id: Optional[int] = Field(None, alias="userId")
    user_latitude: Optional[float] = Field(None, alias="userLatitude")
    user_longitude: Optional[float] = Field(None, alias="userLongitude")
    notes: Optional[str] = None

    class Config:
        populate_by_name = True
