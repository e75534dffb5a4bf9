"""Schemas for registration and login"""
from pydantic import BaseModel, EmailStr, Field, field_validator

EMAIL_MAX_LENGTH = 100


class UserRegister(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6)

    @field_validator("email")
    @classmethod
    def email_length(cls, value: str) -> str:
        if len(value) > EMAIL_MAX_LENGTH:
            raise ValueError(f"email must be at most {EMAIL_MAX_LENGTH} characters")
        return value


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterResponse(BaseModel):
    message: str


class Token(BaseModel):
    token: str
    token_type: str = Field("bearer", alias="tokenType")

    class Config:
        populate_by_name = True
