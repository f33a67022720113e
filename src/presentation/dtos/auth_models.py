"""Pydantic models for authentication."""
from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request model for account registration."""
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=6, description="Password (at least 6 characters)")
    name: str = Field(..., min_length=1, description="Display name")


class LoginRequest(BaseModel):
    """Request model for login."""
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=6, description="Password")
