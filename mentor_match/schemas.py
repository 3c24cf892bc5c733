from datetime import datetime
from typing import List, Literal, Optional
from email_validator import validate_email
from pydantic import BaseModel, Field, field_validator
from .models import UserRole
from .constants import BusinessRules

# --- Authentication Schemas ---
class SignupRequest(BaseModel):
    email: str
    password: str = Field(..., min_length=BusinessRules.MIN_PASSWORD_LENGTH)
    name: str = Field(..., min_length=BusinessRules.MIN_NAME_LENGTH)
    role: UserRole

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        # Stored exactly as sent; login looks it up verbatim
        validate_email(value, check_deliverability=False)
        return value

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value

class SignupResponse(BaseModel):
    message: str
    userId: int

class LoginRequest(BaseModel):
    email: str
    password: str

class Token(BaseModel):
    token: str

class TokenData(BaseModel):
    user_id: Optional[int] = None

class MessageResponse(BaseModel):
    message: str

# --- Profile Schemas ---
class ProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=BusinessRules.MIN_NAME_LENGTH)
    bio: Optional[str] = None
    skills: Optional[List[str]] = Field(None, description="Only applied for mentors.")

    @field_validator("name", "bio", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

class ProfileDetails(BaseModel):
    name: str
    bio: str
    imageUrl: str
    skills: List[str]

class UserProfileResponse(BaseModel):
    id: int
    email: str
    role: UserRole
    profile: ProfileDetails

class ImageUploadResponse(BaseModel):
    message: str
    imageUrl: str

class MentorListItem(BaseModel):
    id: int
    name: str
    bio: str
    imageUrl: str
    skills: List[str]

# --- Matching Request Schemas ---
class MatchingRequestCreate(BaseModel):
    mentor_id: int = Field(..., ge=1, description="User ID of the mentor to request.")
    message: Optional[str] = Field(None, description="Optional message for the mentor.")

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, value):
        return value.strip() if isinstance(value, str) else value

class MatchingRequestCreated(BaseModel):
    message: str
    requestId: int

class MatchingStatusUpdate(BaseModel):
    status: Literal["accepted", "rejected"]

class MatchingRequestBase(BaseModel):
    id: int
    mentee_id: int
    mentor_id: int
    message: str
    status: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

class MenteeMatchingRequestView(MatchingRequestBase):
    """A request as seen by the mentee who sent it."""
    mentor_name: str
    mentor_bio: Optional[str]
    mentor_skills: str # JSON-encoded list of strings

class MentorMatchingRequestView(MatchingRequestBase):
    """A request as seen by the mentor who received it."""
    mentee_name: str
    mentee_bio: Optional[str]
