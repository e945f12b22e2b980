from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.user import UserSummary


class CohortStatus(str, Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    ARCHIVED = "ARCHIVED"


class FormationType(str, Enum):
    TRADING_BASICS = "TRADING_BASICS"
    ADVANCED_TRADING = "ADVANCED_TRADING"
    RISK_MANAGEMENT = "RISK_MANAGEMENT"
    TECHNICAL_ANALYSIS = "TECHNICAL_ANALYSIS"
    FUNDAMENTAL_ANALYSIS = "FUNDAMENTAL_ANALYSIS"
    CUSTOM = "CUSTOM"


class Cohort(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    type: FormationType
    status: CohortStatus
    start_date: date
    end_date: date | None = None
    max_students: int | None = None
    member_count: int = 0


class CohortCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    type: FormationType
    start_date: date
    end_date: date | None = None
    max_students: int | None = Field(None, ge=1)


class CohortStats(BaseModel):
    total: int
    active: int
    completed: int
    draft: int


class CohortMember(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user: UserSummary
    progress: int
    joined_at: datetime


class CohortMemberAdd(BaseModel):
    user_id: int


class CohortMemberProgress(BaseModel):
    # Out-of-range values are clamped to 0..100 by the service
    progress: int
