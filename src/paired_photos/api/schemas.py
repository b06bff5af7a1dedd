"""Pydantic models for request and response bodies."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Login payload."""

    eid: int
    password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    """Registration payload."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    eid: int
    password: str = Field(min_length=1)
    mobile_number: str = Field(alias="mobileNumber")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class UploadResponse(BaseModel):
    """Result of a successful paired upload."""

    message: str
    locations: list[str]


class PhotoResponse(BaseModel):
    """One stored photo pair as returned to clients."""

    location: str
    location2: str
    date: datetime
