"""Caller identity as resolved upstream by the authentication gateway.

The gateway forwards the authenticated user in ``X-User-Id`` along with a
profile snapshot (``X-User-Name``, ``X-User-Avatar``).
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Header

from shops.shared.errors import AuthorizationError
from shops.utils.logging import add_context


@dataclass(frozen=True)
class Caller:
    user_id: str
    name: str | None = None
    avatar: str | None = None

    @property
    def profile(self) -> dict:
        return {"name": self.name, "avatar": self.avatar}


async def current_caller(
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_name: Annotated[str | None, Header()] = None,
    x_user_avatar: Annotated[str | None, Header()] = None,
) -> Caller:
    if not x_user_id or not x_user_id.strip():
        raise AuthorizationError("No user identity, authorization denied")
    add_context(user_id=x_user_id)
    return Caller(user_id=x_user_id.strip(), name=x_user_name, avatar=x_user_avatar)
