"""Caller identity and role checks.

Authentication happens upstream: the gateway validates the caller and
forwards the user id and role claims as request headers. This module
only reads them and enforces the admin role on mutation routes.
"""

from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from master_api.config import Settings, get_settings


@dataclass(frozen=True)
class UserInfo:
    """Identity of the caller as forwarded by the gateway."""

    user_id: str
    roles: frozenset[str] = field(default_factory=frozenset)

    def has_role(self, role: str) -> bool:
        wanted = role.lower()
        return any(r.lower() == wanted for r in self.roles)


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with, falling back to the environment."""
    return getattr(request.app.state, "settings", None) or get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_user_info(request: Request, settings: SettingsDep) -> UserInfo | None:
    """Read the caller identity from the forwarded headers, if any."""
    user_id = (request.headers.get(settings.user_id_header) or "").strip()
    if not user_id:
        return None
    raw_roles = request.headers.get(settings.user_roles_header) or ""
    roles = frozenset(role.strip() for role in raw_roles.split(",") if role.strip())
    return UserInfo(user_id=user_id, roles=roles)


def require_admin(
    settings: SettingsDep,
    user: Annotated[UserInfo | None, Depends(get_user_info)],
) -> UserInfo:
    """Allow only callers holding the admin role claim.

    Raises:
        HTTPException: 401 without an identity, 403 without the role
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required.",
        )
    if not user.has_role(settings.admin_role):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator role required.",
        )
    return user


AdminDep = Annotated[UserInfo, Depends(require_admin)]
