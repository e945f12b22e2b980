from datetime import date

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session, selectinload

from app.db.models.cohort import Cohort as CohortModel
from app.db.models.cohort import CohortMember as CohortMemberModel
from app.errors import DuplicateResourceError, NotFoundError


def get_cohort_by_id(db: Session, cohort_id: int) -> CohortModel | None:
    """Get a cohort by ID."""
    return db.query(CohortModel).filter(CohortModel.id == cohort_id).first()


def _cohorts_query(
    db: Session, status: str | None = None, type: str | None = None
) -> Query:
    query = db.query(CohortModel)
    if status is not None:
        query = query.filter(CohortModel.status == status)
    if type is not None:
        query = query.filter(CohortModel.type == type)
    return query


def count_cohorts(db: Session, status: str | None = None, type: str | None = None) -> int:
    return _cohorts_query(db, status, type).count()


def get_cohorts_page(
    db: Session,
    offset: int,
    limit: int,
    status: str | None = None,
    type: str | None = None,
) -> list[CohortModel]:
    """Fetch one page of cohorts, most recent start date first."""
    return (
        _cohorts_query(db, status, type)
        .options(selectinload(CohortModel.members))
        .order_by(CohortModel.start_date.desc(), CohortModel.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )


def count_cohorts_by_status(db: Session) -> dict[str, int]:
    rows = (
        db.query(CohortModel.status, func.count(CohortModel.id))
        .group_by(CohortModel.status)
        .all()
    )
    return {status: count for status, count in rows}


def create_cohort(
    db: Session,
    name: str,
    type: str,
    start_date: date,
    status: str,
    description: str | None = None,
    end_date: date | None = None,
    max_students: int | None = None,
) -> CohortModel:
    """Create a new cohort in the database. Pure data access - no business logic."""
    db_cohort = CohortModel(
        name=name,
        description=description,
        type=type,
        status=status,
        start_date=start_date,
        end_date=end_date,
        max_students=max_students,
    )
    db.add(db_cohort)
    db.commit()
    db.refresh(db_cohort)
    return db_cohort


def get_member(db: Session, cohort_id: int, user_id: int) -> CohortMemberModel | None:
    return (
        db.query(CohortMemberModel)
        .filter(
            CohortMemberModel.cohort_id == cohort_id,
            CohortMemberModel.user_id == user_id,
        )
        .first()
    )


def count_members(db: Session, cohort_id: int) -> int:
    return (
        db.query(CohortMemberModel)
        .filter(CohortMemberModel.cohort_id == cohort_id)
        .count()
    )


def add_member(db: Session, cohort_id: int, user_id: int) -> CohortMemberModel:
    member = CohortMemberModel(cohort_id=cohort_id, user_id=user_id, progress=0)
    db.add(member)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateResourceError("User is already a member of this cohort") from exc
    db.refresh(member)
    return member


def delete_member(db: Session, cohort_id: int, user_id: int) -> None:
    member = get_member(db, cohort_id, user_id)
    if not member:
        raise NotFoundError("Member not found in this cohort")
    db.delete(member)
    db.commit()


def update_member_progress(
    db: Session, cohort_id: int, user_id: int, progress: int
) -> CohortMemberModel:
    member = get_member(db, cohort_id, user_id)
    if not member:
        raise NotFoundError("Member not found in this cohort")
    member.progress = progress
    db.commit()
    db.refresh(member)
    return member
