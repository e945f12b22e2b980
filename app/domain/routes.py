"""Front-end route table and path matching."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from app.domain.route_access import Role


@dataclass(frozen=True, slots=True)
class RouteRule:
    path: str
    require_auth: bool = True
    allowed_roles: frozenset[Role] | None = None


_ADMIN = frozenset({Role.ADMIN})
_COACH = frozenset({Role.COACH})
_LEARNER = frozenset({Role.LEARNER})

ROUTES: tuple[RouteRule, ...] = (
    RouteRule("/", require_auth=False),
    RouteRule("/login", require_auth=False),
    RouteRule("/register", require_auth=False),
    # Any authenticated user
    RouteRule("/app"),
    RouteRule("/app/cohorts"),
    RouteRule("/app/coaching"),
    RouteRule("/app/subscriptions"),
    RouteRule("/app/profile"),
    # Admin
    RouteRule("/app/coaching-admin", allowed_roles=_ADMIN),
    RouteRule("/app/payments", allowed_roles=_ADMIN),
    RouteRule("/app/users", allowed_roles=_ADMIN),
    RouteRule("/app/reports", allowed_roles=_ADMIN),
    RouteRule("/app/notifications", allowed_roles=_ADMIN),
    RouteRule("/app/plans", allowed_roles=_ADMIN),
    # Learner
    RouteRule("/app/available-plans", allowed_roles=_LEARNER),
    RouteRule("/app/my-payments", allowed_roles=_LEARNER),
    # Coach
    RouteRule("/app/mes-cohortes", allowed_roles=_COACH),
    RouteRule("/app/planning", allowed_roles=_COACH),
    RouteRule("/app/suivi-apprenants", allowed_roles=_COACH),
    RouteRule("/app/rapports-coach", allowed_roles=_COACH),
)

_ROUTES_BY_PATH = {rule.path: rule for rule in ROUTES}


def normalize_path(location: str) -> str:
    """Strip query string, fragment and trailing slash from ``location``."""
    path = urlsplit(location).path.replace("\\", "/")
    # A single leading slash: "//x" would read as a host
    path = "/" + path.strip("/")
    return path


def match_route(location: str) -> RouteRule | None:
    """Return the rule guarding ``location``, or None for unknown paths."""
    return _ROUTES_BY_PATH.get(normalize_path(location))


def relative_location(location: str) -> str:
    """Rebuild ``location`` as a same-origin path, keeping query and fragment.

    Scheme and host are dropped, so absolute (``https://host/...``) and
    scheme-relative (``//host/...``) inputs cannot point outside the app.
    """
    parts = urlsplit(location)
    result = normalize_path(location)
    if parts.query:
        result += "?" + parts.query
    if parts.fragment:
        result += "#" + parts.fragment
    return result
