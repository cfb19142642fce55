from typing import Optional, Union

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class VerifyCodeRequest(BaseModel):
    user_id: Optional[int] = Field(None, alias="userId")
    code: Optional[Union[str, int]] = None

    class Config:
        populate_by_name = True


class ResendCodeRequest(BaseModel):
    user_id: Optional[int] = Field(None, alias="userId")

    class Config:
        populate_by_name = True


class UpdatePasswordRequest(BaseModel):
    user_id: Optional[int] = Field(None, alias="userId")
    current_password: Optional[str] = Field(None, alias="currentPassword")
    new_password: Optional[str] = Field(None, alias="newPassword")

    class Config:
        populate_by_name = True


class ForgetPasswordRequest(BaseModel):
    user_id: Optional[int] = Field(None, alias="userId")
    email: Optional[str] = None
    new_password: Optional[str] = Field(None, alias="newPassword")

    class Config:
        populate_by_name = True
