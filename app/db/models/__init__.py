from app.db.models.role import Role
from app.db.models.user import User
from app.db.models.cohort import Cohort, CohortMember

__all__ = ["Role", "User", "Cohort", "CohortMember"]
