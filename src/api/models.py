"""Pydantic models for API request/response."""

from typing import Optional
from pydantic import BaseModel, Field


class UserRequest(BaseModel):
    """Request model for registration and profile updates."""
    email: str = Field(..., min_length=1, description="Stored and matched exactly as sent")
    password: str


class LoginRequest(BaseModel):
    """Request model for login."""
    email: str
    password: str
    expires_in_seconds: Optional[int] = Field(
        None, description="Requested token lifetime; capped at 24 hours"
    )


class UserResponse(BaseModel):
    """Public view of a user. Never carries the password hash."""
    id: int
    email: str


class LoginResponse(UserResponse):
    token: str


class ChirpRequest(BaseModel):
    body: str


class ChirpResponse(BaseModel):
    id: int = Field(..., description="Chirp ID, increasing in creation order")
    body: str
