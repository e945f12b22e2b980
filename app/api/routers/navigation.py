from fastapi import APIRouter, Cookie, Depends, Query, Response

from app.api.deps import get_optional_user
from app.core.config import settings
from app.db.models.user import User as UserModel
from app.schemas.navigation import NavigationDecision
from app.services.navigation import NavigationSessionStore, resolve_navigation

NAVIGATION_COOKIE = "nav_session"

router = APIRouter(prefix="/navigation", tags=["navigation"])

navigation_sessions = NavigationSessionStore(settings.navigation_session_limit)


@router.get("/resolve", response_model=NavigationDecision)
def resolve_route(
    response: Response,
    path: str = Query(..., description="Front-end location the user is navigating to"),
    nav_session: str | None = Cookie(None),
    current_user: UserModel | None = Depends(get_optional_user),
):
    """
    Tell the front end whether to render ``path`` or redirect.

    - Unauthenticated users on guarded routes go to /login with the attempted location
    - Users whose role isn't allowed go to their role's landing page
    - Unknown paths resolve to the 404 page

    Notices are included at most once per location for a given session.
    """
    session_id, gate = navigation_sessions.get_or_create(nav_session)
    if session_id != nav_session:
        response.set_cookie(NAVIGATION_COOKIE, session_id, httponly=True, samesite="lax")
    return resolve_navigation(gate, path, current_user)
