from typing import Optional

from pydantic import BaseModel, Field


class CreateNotificationRequest(BaseModel):
    title: Optional[str] = None
    message: Optional[str] = None


class DeleteNotificationRequest(BaseModel):
    notification_id: Optional[int] = Field(None, alias="notificationId")

    class Config:
        populate_by_name = True
