from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class BenchmarkCreate(BaseModel):
    dimension_id: str
    industry_id: str
    value: float


class BenchmarkUpdate(BaseModel):
    dimension_id: Optional[str] = None
    industry_id: Optional[str] = None
    value: Optional[float] = None


class BenchmarkResponse(BaseModel):
    id: str
    dimension_id: str
    industry_id: str
    value: float
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
