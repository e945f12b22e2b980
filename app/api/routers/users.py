from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_db, require_roles
from app.core.config import settings
from app.db.models.user import User as UserModel
from app.domain.route_access import Role
from app.schemas.pagination import PaginatedResponse
from app.schemas.user import User
from app.services.user import get_user, list_users

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=PaginatedResponse[User])
def get_all_users_paginated(
    page: int = Query(1, description="Page number (1-indexed, clamped to the last page)"),
    page_size: int = Query(
        settings.default_page_size,
        le=settings.max_page_size,
        description="Number of items per page",
    ),
    role: Role | None = Query(None, description="Only users with this role"),
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(require_roles(Role.ADMIN)),
):
    """Get all users with pagination. Only admin users can access this endpoint."""
    users, paginator = list_users(db, page=page, page_size=page_size, role=role)
    return PaginatedResponse.from_paginator(
        [User.model_validate(user) for user in users], paginator
    )


@router.get("/{user_id}", response_model=User)
def get_user_by_id(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(get_current_user),
):
    """
    Get a user by ID.

    - Admin can get any user
    - Coach and learner can only get themselves
    """
    user = get_user(db, user_id, current_user)
    return User.model_validate(user)
