"""Cohort service: listings, creation, statistics and membership rules."""

import logging

from sqlalchemy.orm import Session

import app.repositories.cohort as cohort_repo
import app.repositories.user as user_repo
from app.db.models.cohort import Cohort as CohortModel
from app.db.models.cohort import CohortMember as CohortMemberModel
from app.domain.pagination import Paginator, ServerPaginator, paginate
from app.errors import DomainValidationError, DuplicateResourceError, NotFoundError
from app.schemas.cohort import CohortCreate, CohortStats, CohortStatus, FormationType

logger = logging.getLogger(__name__)

MIN_PROGRESS = 0
MAX_PROGRESS = 100


def list_cohorts(
    db: Session,
    page: int = 1,
    page_size: int = 10,
    status: CohortStatus | None = None,
    type: FormationType | None = None,
) -> tuple[list[CohortModel], ServerPaginator]:
    """Get one page of cohorts matching the optional status/type filters."""
    status_value = status.value if status is not None else None
    type_value = type.value if type is not None else None
    paginator = ServerPaginator(
        cohort_repo.count_cohorts(db, status=status_value, type=type_value),
        page_size=page_size,
        initial_page=page,
    )
    cohorts = cohort_repo.get_cohorts_page(
        db,
        offset=paginator.offset,
        limit=paginator.limit,
        status=status_value,
        type=type_value,
    )
    return cohorts, paginator


def get_cohort(db: Session, cohort_id: int) -> CohortModel:
    cohort = cohort_repo.get_cohort_by_id(db, cohort_id)
    if not cohort:
        raise NotFoundError("Cohort not found")
    return cohort


def create_cohort(db: Session, cohort_data: CohortCreate) -> CohortModel:
    """
    Create a cohort in DRAFT status.

    Raises:
        DomainValidationError: If end_date is not after start_date
    """
    if cohort_data.end_date is not None and cohort_data.start_date >= cohort_data.end_date:
        raise DomainValidationError("End date must be after start date")

    cohort = cohort_repo.create_cohort(
        db,
        name=cohort_data.name,
        description=cohort_data.description,
        type=cohort_data.type.value,
        status=CohortStatus.DRAFT.value,
        start_date=cohort_data.start_date,
        end_date=cohort_data.end_date,
        max_students=cohort_data.max_students,
    )
    logger.info("Created cohort %s (%s)", cohort.id, cohort.name)
    return cohort


def get_cohort_stats(db: Session) -> CohortStats:
    counts = cohort_repo.count_cohorts_by_status(db)
    return CohortStats(
        total=sum(counts.values()),
        active=counts.get(CohortStatus.ACTIVE.value, 0),
        completed=counts.get(CohortStatus.COMPLETED.value, 0),
        draft=counts.get(CohortStatus.DRAFT.value, 0),
    )


def list_members(
    db: Session, cohort_id: int, page: int = 1, page_size: int = 10
) -> Paginator[CohortMemberModel]:
    """
    Page through a cohort's members.

    Cohorts are small and the member list is loaded with the cohort, so the
    loaded collection is sliced in memory rather than queried per page.
    """
    cohort = get_cohort(db, cohort_id)
    return paginate(cohort.members, page=page, page_size=page_size)


def add_member(db: Session, cohort_id: int, user_id: int) -> CohortMemberModel:
    """
    Enroll a user in a cohort.

    Raises:
        NotFoundError: If the cohort or the user doesn't exist
        DuplicateResourceError: If the user is already a member
        DomainValidationError: If the cohort has reached max_students
    """
    cohort = get_cohort(db, cohort_id)

    if not user_repo.get_user_by_id(db, user_id):
        raise NotFoundError("User not found")

    if cohort_repo.get_member(db, cohort_id, user_id):
        raise DuplicateResourceError("User is already a member of this cohort")

    if cohort.max_students is not None:
        if cohort_repo.count_members(db, cohort_id) >= cohort.max_students:
            raise DomainValidationError("Cohort is full")

    member = cohort_repo.add_member(db, cohort_id, user_id)
    logger.info("User %s joined cohort %s", user_id, cohort_id)
    return member


def remove_member(db: Session, cohort_id: int, user_id: int) -> None:
    get_cohort(db, cohort_id)
    cohort_repo.delete_member(db, cohort_id, user_id)
    logger.info("User %s left cohort %s", user_id, cohort_id)


def update_member_progress(
    db: Session, cohort_id: int, user_id: int, progress: int
) -> CohortMemberModel:
    """Record a member's progress, clamped into 0..100."""
    get_cohort(db, cohort_id)
    progress = min(max(progress, MIN_PROGRESS), MAX_PROGRESS)
    return cohort_repo.update_member_progress(db, cohort_id, user_id, progress)
