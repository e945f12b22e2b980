from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

from app.schemas.role import Role


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    status: UserStatus
    role: Role
    created_at: datetime


class UserSummary(BaseModel):
    """Compact user representation embedded in cohort member listings."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    first_name: str
    last_name: str
