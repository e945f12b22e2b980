from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db, require_roles
from app.core.config import settings
from app.db.models.user import User as UserModel
from app.domain.route_access import Role
from app.schemas.cohort import (
    Cohort,
    CohortCreate,
    CohortMember,
    CohortMemberAdd,
    CohortMemberProgress,
    CohortStats,
    CohortStatus,
    FormationType,
)
from app.schemas.pagination import PaginatedResponse
import app.services.cohort as cohort_service

router = APIRouter(prefix="/cohorts", tags=["cohorts"])


@router.get("", response_model=PaginatedResponse[Cohort])
def get_cohorts(
    page: int = Query(1, description="Page number (1-indexed, clamped to the last page)"),
    page_size: int = Query(
        settings.default_page_size,
        le=settings.max_page_size,
        description="Number of items per page",
    ),
    cohort_status: CohortStatus | None = Query(None, alias="status"),
    formation_type: FormationType | None = Query(None, alias="type"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """List cohorts, most recent start date first."""
    cohorts, paginator = cohort_service.list_cohorts(
        db,
        page=page,
        page_size=page_size,
        status=cohort_status,
        type=formation_type,
    )
    return PaginatedResponse.from_paginator(
        [Cohort.model_validate(cohort) for cohort in cohorts], paginator
    )


@router.post("", response_model=Cohort, status_code=status.HTTP_201_CREATED)
def create_new_cohort(
    cohort_data: CohortCreate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(Role.ADMIN)),
):
    """Create a cohort. New cohorts start as drafts. Admin only."""
    cohort = cohort_service.create_cohort(db, cohort_data)
    return Cohort.model_validate(cohort)


@router.get("/stats", response_model=CohortStats)
def get_cohort_stats(
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(Role.ADMIN)),
):
    return cohort_service.get_cohort_stats(db)


@router.get("/{cohort_id}", response_model=Cohort)
def get_cohort_by_id(
    cohort_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    cohort = cohort_service.get_cohort(db, cohort_id)
    return Cohort.model_validate(cohort)


@router.get("/{cohort_id}/members", response_model=PaginatedResponse[CohortMember])
def get_cohort_members(
    cohort_id: int,
    page: int = Query(1),
    page_size: int = Query(settings.default_page_size, le=settings.max_page_size),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(Role.ADMIN, Role.COACH)),
):
    """List the members of a cohort with their progress. Admin and coach only."""
    paginator = cohort_service.list_members(
        db, cohort_id, page=page, page_size=page_size
    )
    return PaginatedResponse.from_paginator(
        [CohortMember.model_validate(member) for member in paginator.paginated_data],
        paginator,
    )


@router.post(
    "/{cohort_id}/members",
    response_model=CohortMember,
    status_code=status.HTTP_201_CREATED,
)
def add_cohort_member(
    cohort_id: int,
    member_data: CohortMemberAdd,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(Role.ADMIN)),
):
    """
    Enroll a user in a cohort. Admin only.

    Fails when the user is already enrolled or the cohort is full.
    """
    member = cohort_service.add_member(db, cohort_id, member_data.user_id)
    return CohortMember.model_validate(member)


@router.delete("/{cohort_id}/members/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_cohort_member(
    cohort_id: int,
    user_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(Role.ADMIN)),
):
    cohort_service.remove_member(db, cohort_id, user_id)


@router.put("/{cohort_id}/members/{user_id}/progress", response_model=CohortMember)
def update_cohort_member_progress(
    cohort_id: int,
    user_id: int,
    progress_data: CohortMemberProgress,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(Role.ADMIN, Role.COACH)),
):
    """Set a member's progress. Values outside 0..100 are clamped."""
    member = cohort_service.update_member_progress(
        db, cohort_id, user_id, progress_data.progress
    )
    return CohortMember.model_validate(member)
