from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class UserIdRequest(BaseModel):
    user_id: Optional[int] = Field(None, alias="userId")

    class Config:
        populate_by_name = True


class CreateUserRequest(BaseModel):
    name: Optional[str] = None
    username_email: Optional[EmailStr] = Field(None, alias="usernameEmail")
    password: Optional[str] = None
    role: Optional[str] = None
    nim_nip: Optional[str] = Field(None, alias="nimNip")

    class Config:
        populate_by_name = True


class EditUserRequest(CreateUserRequest):
    user_id: Optional[int] = Field(None, alias="userId")
