from sqlalchemy.orm import Session

from app.db.models.role import Role as RoleModel


def get_all_roles(db: Session) -> list[RoleModel]:
    return db.query(RoleModel).order_by(RoleModel.id).all()

