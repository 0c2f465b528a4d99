from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ClientCreate(BaseModel):
    name: str
    address: Optional[str] = None
    logo: Optional[str] = None
    background: Optional[str] = None
    primary_color: Optional[str] = None
    accent_color: Optional[str] = None
    require_profile: bool = False
    require_research: bool = False
    whitelabel: bool = False


class ClientUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None
    logo: Optional[str] = None
    background: Optional[str] = None
    primary_color: Optional[str] = None
    accent_color: Optional[str] = None
    require_profile: Optional[bool] = None
    require_research: Optional[bool] = None
    whitelabel: Optional[bool] = None


class ClientResponse(BaseModel):
    id: str
    name: str
    address: Optional[str] = None
    logo: Optional[str] = None
    background: Optional[str] = None
    primary_color: Optional[str] = None
    accent_color: Optional[str] = None
    require_profile: bool = False
    require_research: bool = False
    whitelabel: bool = False
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
