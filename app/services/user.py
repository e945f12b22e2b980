from sqlalchemy.orm import Session

import app.repositories.user as user_repo
from app.db.models.user import User as UserModel
from app.domain.pagination import ServerPaginator
from app.domain.route_access import Role
from app.errors import ForbiddenError, NotFoundError


def list_users(
    db: Session, page: int = 1, page_size: int = 10, role: Role | None = None
) -> tuple[list[UserModel], ServerPaginator]:
    """
    Get one page of users.

    This is admin-only functionality, so no authorization checks are needed here
    (authorization is handled at the controller level).

    The requested page is clamped against the current count, so asking for a
    page past the end returns the last page.

    Returns:
        Tuple of (users on the page, paginator describing the page)
    """
    role_name = role.value if role is not None else None
    paginator = ServerPaginator(
        user_repo.count_users(db, role=role_name),
        page_size=page_size,
        initial_page=page,
    )
    users = user_repo.get_users_page(
        db, offset=paginator.offset, limit=paginator.limit, role=role_name
    )
    return users, paginator


def get_user(db: Session, user_id: int, current_user: UserModel) -> UserModel:
    """
    Get a user by ID with authorization checks.

    - Admin can get any user
    - Coach and learner can only get themselves

    Raises:
        NotFoundError: If user doesn't exist
        ForbiddenError: If a non-admin asks for another user
    """
    user = user_repo.get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    if current_user.role.name != Role.ADMIN.value and current_user.id != user_id:
        raise ForbiddenError("You can only access your own user information")

    return user
