from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class IndustryCreate(BaseModel):
    name: str


class IndustryUpdate(BaseModel):
    name: Optional[str] = None


class IndustryResponse(BaseModel):
    id: str
    name: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
