from sqlalchemy.orm import Query, Session

from app.db.models.role import Role as RoleModel
from app.db.models.user import User as UserModel


def get_user_by_id(db: Session, user_id: int) -> UserModel | None:
    """Get a user by ID."""
    return db.query(UserModel).filter(UserModel.id == user_id).first()


def _users_query(db: Session, role: str | None = None) -> Query:
    query = db.query(UserModel)
    if role is not None:
        query = query.join(RoleModel, UserModel.role_id == RoleModel.id).filter(
            RoleModel.name == role
        )
    return query


def count_users(db: Session, role: str | None = None) -> int:
    """Count users, optionally restricted to one role name."""
    return _users_query(db, role).count()


def get_users_page(
    db: Session, offset: int, limit: int, role: str | None = None
) -> list[UserModel]:
    """
    Fetch one page of users, sorted by last name then first name.

    The id tiebreaker keeps page boundaries stable between requests.
    """
    return (
        _users_query(db, role)
        .order_by(UserModel.last_name, UserModel.first_name, UserModel.id)
        .offset(offset)
        .limit(limit)
        .all()
    )
