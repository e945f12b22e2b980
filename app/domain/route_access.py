"""Role-based access rules for front-end routes.

``authorize`` is a pure decision over the caller's authentication state, role
and a route's allow-list. ``RouteGate`` adds the one piece of state the
decision needs in practice: a user-facing notice is emitted at most once per
location, and re-armed when the location changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Collection

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"

UNAUTHENTICATED_NOTICE = "Vous devez être connecté pour accéder à cette page"
FORBIDDEN_NOTICE = (
    "Vous n'avez pas les permissions nécessaires pour accéder à cette page"
)


class Role(str, Enum):
    ADMIN = "ADMIN"
    COACH = "COACH"
    LEARNER = "APPRENANT"


DEFAULT_LANDING: dict[Role, str] = {
    Role.ADMIN: "/app",
    Role.COACH: "/app/mes-cohortes",
    Role.LEARNER: "/app",
}


class AccessOutcome(str, Enum):
    RENDER = "render"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True, slots=True)
class AccessDecision:
    """Result of evaluating a route guard.

    ``redirect_to`` is None when the route should render. For the
    unauthenticated case ``from_location`` carries the attempted location so
    the login page can send the user back after signing in.
    """

    outcome: AccessOutcome
    location: str
    redirect_to: str | None = None
    from_location: str | None = None
    notice: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is AccessOutcome.RENDER


def landing_path(role: Role) -> str:
    return DEFAULT_LANDING[role]


def authorize(
    location: str,
    *,
    authenticated: bool,
    role: Role | None,
    allowed_roles: Collection[Role] | None = None,
    require_auth: bool = True,
) -> AccessDecision:
    """Decide whether ``location`` renders or redirects. Never raises."""
    if require_auth and not authenticated:
        return AccessDecision(
            outcome=AccessOutcome.UNAUTHENTICATED,
            location=location,
            redirect_to=LOGIN_PATH,
            from_location=location,
        )

    # Role checks only apply once a role is known.
    if allowed_roles and role is not None and role not in allowed_roles:
        return AccessDecision(
            outcome=AccessOutcome.FORBIDDEN,
            location=location,
            redirect_to=landing_path(role),
        )

    return AccessDecision(outcome=AccessOutcome.RENDER, location=location)


class RouteGate:
    """Stateful wrapper around ``authorize`` owned by a single navigation session."""

    def __init__(self):
        self._location: str | None = None
        self._notice_shown = False

    def evaluate(
        self,
        location: str,
        *,
        authenticated: bool,
        role: Role | None,
        allowed_roles: Collection[Role] | None = None,
        require_auth: bool = True,
    ) -> AccessDecision:
        if location != self._location:
            self._location = location
            self._notice_shown = False

        decision = authorize(
            location,
            authenticated=authenticated,
            role=role,
            allowed_roles=allowed_roles,
            require_auth=require_auth,
        )
        if decision.allowed or self._notice_shown:
            return decision

        self._notice_shown = True
        if decision.outcome is AccessOutcome.UNAUTHENTICATED:
            notice = UNAUTHENTICATED_NOTICE
        else:
            notice = FORBIDDEN_NOTICE
        logger.info(
            "Access to %s denied (%s), redirecting to %s",
            location,
            decision.outcome.value,
            decision.redirect_to,
        )
        return replace(decision, notice=notice)
