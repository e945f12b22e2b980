"""Navigation service: resolves front-end route changes against the route table.

Every browser session owns its own ``RouteGate`` so that the "you must log in"
and "forbidden" notices are sent once per location change and per session.
"""

import logging
import secrets
import threading
from collections import OrderedDict

from app.db.models.user import User as UserModel
from app.domain.route_access import AccessOutcome, Role, RouteGate
from app.domain.routes import match_route, normalize_path, relative_location
from app.schemas.navigation import NavigationAction, NavigationDecision

logger = logging.getLogger(__name__)


class NavigationSessionStore:
    """Bounded, thread-safe map of session id -> RouteGate.

    When full, the least recently used session is evicted.
    """

    def __init__(self, max_sessions: int):
        self._max_sessions = max(max_sessions, 1)
        self._gates: OrderedDict[str, RouteGate] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._gates)

    def get_or_create(self, session_id: str | None) -> tuple[str, RouteGate]:
        """Return the gate for ``session_id``, starting a new session if unknown."""
        with self._lock:
            if session_id is not None and session_id in self._gates:
                self._gates.move_to_end(session_id)
                return session_id, self._gates[session_id]

            session_id = secrets.token_urlsafe(24)
            gate = RouteGate()
            self._gates[session_id] = gate
            while len(self._gates) > self._max_sessions:
                evicted, _ = self._gates.popitem(last=False)
                logger.debug("Evicted navigation session %s", evicted)
            return session_id, gate


def _user_role(user: UserModel | None) -> Role | None:
    if user is None:
        return None
    try:
        return Role(user.role.name)
    except ValueError:
        logger.warning("User %s has unknown role %r", user.id, user.role.name)
        return None


def resolve_navigation(
    gate: RouteGate, location: str, user: UserModel | None
) -> NavigationDecision:
    """Decide whether ``location`` renders, redirects, or is the 404 page."""
    path = normalize_path(location)
    rule = match_route(path)
    if rule is None:
        return NavigationDecision(action=NavigationAction.NOT_FOUND, location=path)

    decision = gate.evaluate(
        path,
        authenticated=user is not None,
        role=_user_role(user),
        allowed_roles=rule.allowed_roles,
        require_auth=rule.require_auth,
    )
    if decision.outcome is AccessOutcome.RENDER:
        return NavigationDecision(action=NavigationAction.RENDER, location=path)

    return NavigationDecision(
        action=NavigationAction.REDIRECT,
        location=path,
        redirect_to=decision.redirect_to,
        from_location=(
            relative_location(location) if decision.from_location is not None else None
        ),
        notice=decision.notice,
    )
