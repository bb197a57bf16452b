"""FastAPI routes for the Shops bounded context.

Each route translates between Pydantic schemas (external contract) and
ShopStore operations. The caller identity comes from the gateway headers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from shops.api.caller import Caller, current_caller
from shops.api.schemas import (
    AddCommentRequest,
    CommentSchema,
    CreateShopRequest,
    MessageResponse,
    ShopResponse,
)
from shops.shop.store import ShopStore

shop_router = APIRouter(prefix="/shops", tags=["shops"])


async def shop_store() -> ShopStore:
    return ShopStore()


StoreDep = Annotated[ShopStore, Depends(shop_store)]
CallerDep = Annotated[Caller, Depends(current_caller)]


@shop_router.post("", response_model=ShopResponse)
async def create_shop(body: CreateShopRequest, caller: CallerDep, store: StoreDep) -> ShopResponse:
    """Register a shop owned by the caller."""
    fields = body.model_dump()
    if not fields.get("avatar"):
        fields["avatar"] = caller.avatar
    shop = store.create(caller.user_id, fields)
    return ShopResponse.from_shop(shop)


@shop_router.get("", response_model=list[ShopResponse])
async def list_shops(store: StoreDep, sortby: str = "highest") -> list[ShopResponse]:
    """List all shops, ordered by rating (highest/lowest) or review count (most/least)."""
    return [ShopResponse.from_shop(shop) for shop in store.list(sortby)]


@shop_router.get("/{shop_id}", response_model=ShopResponse)
async def get_shop(shop_id: str, store: StoreDep) -> ShopResponse:
    return ShopResponse.from_shop(store.get_by_id(shop_id))


@shop_router.delete("/{shop_id}", response_model=MessageResponse)
async def delete_shop(shop_id: str, caller: CallerDep, store: StoreDep) -> MessageResponse:
    """Delete a shop. Only its owner may do so."""
    store.delete(shop_id, caller.user_id)
    return MessageResponse(msg="Shop removed")


@shop_router.put("/like/{shop_id}", response_model=list[str])
async def like_shop(shop_id: str, caller: CallerDep, store: StoreDep) -> list[str]:
    return store.like(shop_id, caller.user_id)


@shop_router.put("/unlike/{shop_id}", response_model=list[str])
async def unlike_shop(shop_id: str, caller: CallerDep, store: StoreDep) -> list[str]:
    return store.unlike(shop_id, caller.user_id)


@shop_router.post("/comment/{shop_id}", response_model=list[CommentSchema])
async def add_comment(
    shop_id: str, body: AddCommentRequest, caller: CallerDep, store: StoreDep
) -> list[CommentSchema]:
    """Comment on a shop with a numeric review."""
    comments = store.add_comment(shop_id, caller.user_id, caller.profile, body.text, body.review)
    return [CommentSchema(**c) for c in comments]


@shop_router.delete("/comment/{shop_id}/{comment_id}", response_model=list[CommentSchema])
async def remove_comment(shop_id: str, comment_id: str, caller: CallerDep, store: StoreDep) -> list[CommentSchema]:
    """Delete a comment. Only its author may do so."""
    comments = store.remove_comment(shop_id, comment_id, caller.user_id)
    return [CommentSchema(**c) for c in comments]
