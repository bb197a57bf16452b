"""Pydantic request/response schemas for the Shops API.

These are separate from the Shop aggregate (anti-corruption pattern).
The API layer is the external contract; the aggregate is the internal model.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateShopRequest(BaseModel):
    # Required-ness of ``text`` is a domain rule, reported as a 400.
    text: str | None = None
    name: str | None = None
    address: str | None = None
    suburb: str | None = None
    avatar: str | None = None


class AddCommentRequest(BaseModel):
    text: str | None = None
    review: Any = None  # must parse as a number; checked by the domain


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class CommentSchema(BaseModel):
    id: str
    text: str
    review: float
    author: str
    name: str | None = None
    avatar: str | None = None
    date: str


class ShopResponse(BaseModel):
    id: str
    name: str | None = None
    text: str
    address: str | None = None
    suburb: str | None = None
    avatar: str | None = None
    owner_user: str
    likes: list[str]
    comments: list[CommentSchema]
    average_review: float
    total_review: int
    created_at: datetime | None = None

    @classmethod
    def from_shop(cls, shop) -> ShopResponse:
        return cls(
            id=str(shop.id),
            name=shop.name,
            text=shop.text,
            address=shop.address,
            suburb=shop.suburb,
            avatar=shop.avatar,
            owner_user=str(shop.owner_user),
            likes=shop.like_list,
            comments=[CommentSchema(**c) for c in shop.comment_list],
            average_review=shop.average_review,
            total_review=shop.total_review,
            created_at=shop.created_at,
        )


class MessageResponse(BaseModel):
    msg: str
