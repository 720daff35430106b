# File: app/schemas/auth.py

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr = Field(examples=["a@b.com"])
    password: str = Field(min_length=1, examples=["secret123"])


class AccessToken(BaseModel):
    accessToken: str
