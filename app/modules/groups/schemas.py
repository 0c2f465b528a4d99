from enum import Enum
from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime


# group_members.role is free text; older rows mark managers as 'leader'
LEGACY_MANAGER_ROLES = ("leader",)


class MemberRole(str, Enum):
    MEMBER = "member"
    MANAGER = "manager"

    @classmethod
    def manager_values(cls) -> list:
        """Stored role strings that mean manager, including rows written as 'leader'"""
        return [cls.MANAGER.value, *LEGACY_MANAGER_ROLES]


class GroupCreate(BaseModel):
    client_id: str
    name: str
    description: Optional[str] = None
    target_id: Optional[str] = None


class GroupUpdate(BaseModel):
    client_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    target_id: Optional[str] = None


class GroupResponse(BaseModel):
    id: str
    client_id: str
    name: str
    description: Optional[str] = None
    target_id: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class GroupMemberAdd(BaseModel):
    user_id: str
    position: Optional[str] = None


class GroupMemberResponse(BaseModel):
    id: str
    group_id: str
    profile_id: str
    role: MemberRole = MemberRole.MEMBER
    position: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True

    @field_validator("role", mode="before")
    @classmethod
    def read_legacy_role(cls, value):
        if value is None:
            return MemberRole.MEMBER
        if value in LEGACY_MANAGER_ROLES:
            return MemberRole.MANAGER
        return value

    @property
    def is_manager(self) -> bool:
        return self.role == MemberRole.MANAGER
