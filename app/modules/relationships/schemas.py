from pydantic import BaseModel
from typing import Optional


class ClientAssign(BaseModel):
    client_id: str


class IndustryAssign(BaseModel):
    industry_id: str


class ManagerAssign(BaseModel):
    position: Optional[str] = None
