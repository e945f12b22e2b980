from enum import Enum

from pydantic import BaseModel, Field


class NavigationAction(str, Enum):
    RENDER = "render"
    REDIRECT = "redirect"
    NOT_FOUND = "not_found"


class NavigationDecision(BaseModel):
    """What the front end should do when the user navigates to ``location``."""

    action: NavigationAction
    location: str
    redirect_to: str | None = None
    from_location: str | None = Field(
        None, description="Attempted location to return to after login"
    )
    notice: str | None = Field(
        None, description="Message to show the user, sent at most once per location"
    )
