from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from app.db.base import Base


class Cohort(Base):
    __tablename__ = "cohorts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    type = Column(String(32), nullable=False)
    status = Column(String(16), nullable=False, default="DRAFT")
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=True)
    max_students = Column(Integer, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    # Relationships
    members = relationship(
        "CohortMember",
        back_populates="cohort",
        cascade="all, delete-orphan",
        order_by="CohortMember.id",
    )

    @property
    def member_count(self) -> int:
        return len(self.members)


class CohortMember(Base):
    __tablename__ = "cohort_members"
    __table_args__ = (UniqueConstraint("cohort_id", "user_id", name="uq_cohort_members_cohort_user"),)

    id = Column(Integer, primary_key=True, index=True)
    cohort_id = Column(Integer, ForeignKey("cohorts.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    progress = Column(Integer, nullable=False, default=0)
    joined_at = Column(DateTime, nullable=False, server_default=func.now())

    # Relationships
    cohort = relationship("Cohort", back_populates="members")
    user = relationship("User", backref="cohort_memberships")
