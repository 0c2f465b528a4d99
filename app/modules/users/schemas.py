from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime


class UserCreate(BaseModel):
    username: str
    name: str
    email: EmailStr
    auth_user_id: Optional[str] = None
    client_id: Optional[str] = None
    industry_id: Optional[str] = None
    language_id: Optional[str] = None


class UserUpdate(BaseModel):
    username: Optional[str] = None
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    client_id: Optional[str] = None
    industry_id: Optional[str] = None
    language_id: Optional[str] = None
    last_login_at: Optional[datetime] = None
    completed_profile: Optional[bool] = None
    accepted_terms: Optional[bool] = None
    accepted_at: Optional[datetime] = None
    accepted_signature: Optional[str] = None


class UserResponse(BaseModel):
    id: str
    auth_user_id: Optional[str] = None
    username: str
    name: str
    email: str
    client_id: Optional[str] = None
    industry_id: Optional[str] = None
    language_id: Optional[str] = None
    last_login_at: Optional[datetime] = None
    completed_profile: bool = False
    accepted_terms: Optional[bool] = None
    accepted_at: Optional[datetime] = None
    accepted_signature: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
