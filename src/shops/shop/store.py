"""ShopStore: the operations the transport layer calls.

Queries read through the repository. Every mutation is a Protean command
processed synchronously inside its own unit of work:

    load shop (version v) → apply change → save (Protean checks v)

When another writer saved the shop in between, Protean raises
``ExpectedVersionError`` and the whole command is processed again from a
fresh read, up to ``max_attempts`` times. Domain failures (duplicate like,
wrong author, ...) are raised from the fresh state and never retried.
Reads never write.
"""

from __future__ import annotations

import structlog
from protean.exceptions import ExpectedVersionError
from protean.utils.globals import current_domain

from shops.shared.errors import NotFoundError, StaleShopError, ValidationError
from shops.shared.object_id import is_object_id
from shops.shop.comments import parse_review
from shops.shop.commenting import AddComment, RemoveComment
from shops.shop.liking import LikeShop, UnlikeShop
from shops.shop.registration import RegisterShop
from shops.shop.removal import DeleteShop
from shops.shop.repository import ShopRepository
from shops.shop.shop import Shop

logger = structlog.get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 5

# sortby -> (field, descending)
SORT_MODES = {
    "highest": ("average_review", True),
    "lowest": ("average_review", False),
    "loweset": ("average_review", False),  # legacy client spelling
    "most": ("total_review", True),
    "least": ("total_review", False),
}

_SHOP_FIELDS = ("name", "text", "address", "suburb", "avatar")


def _configured_max_attempts() -> int:
    custom = current_domain.config.get("custom") or {}
    return int(custom.get("max_write_attempts", DEFAULT_MAX_ATTEMPTS))


class ShopStore:
    def __init__(self, max_attempts: int | None = None):
        self.max_attempts = max_attempts if max_attempts is not None else _configured_max_attempts()
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    @property
    def repository(self) -> ShopRepository:
        return current_domain.repository_for(Shop)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def list(self, sort_key) -> list[Shop]:
        """All shops ordered by one of the named sort modes."""
        try:
            field, descending = SORT_MODES[sort_key]
        except (KeyError, TypeError):
            raise ValidationError({"sortby": [f"Unknown sort key: {sort_key!r}"]}) from None

        shops = sorted(self.repository.all_shops(), key=lambda s: (s.name or "", str(s.id)))
        return sorted(shops, key=lambda s: getattr(s, field) or 0, reverse=descending)

    def get_by_id(self, shop_id) -> Shop:
        self._check_id(shop_id)
        shop = self.repository.load(shop_id)
        shop.refresh_ratings()
        return shop

    # -------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------
    def create(self, owner_user, fields) -> Shop:
        """Register a shop owned by ``owner_user``.

        Only the known content fields are taken from ``fields``; ownership
        always comes from the caller.
        """
        shop_id = current_domain.process(
            RegisterShop(owner_user=owner_user, **{name: fields.get(name) for name in _SHOP_FIELDS}),
            asynchronous=False,
        )
        logger.info("Shop registered", shop_id=shop_id, owner_user=str(owner_user))
        return self.repository.load(shop_id)

    def delete(self, shop_id, caller) -> None:
        self._dispatch(shop_id, "delete", lambda: DeleteShop(shop_id=shop_id, requested_by=caller))

    def like(self, shop_id, caller) -> list[str]:
        return self._dispatch(shop_id, "like", lambda: LikeShop(shop_id=shop_id, user=caller))

    def unlike(self, shop_id, caller) -> list[str]:
        return self._dispatch(shop_id, "unlike", lambda: UnlikeShop(shop_id=shop_id, user=caller))

    def add_comment(self, shop_id, caller, profile, text, review) -> list[dict]:
        self._check_id(shop_id)
        # Float command fields would cast booleans; the review rules reject them.
        rating = parse_review(review)
        profile = profile or {}
        return self._dispatch(
            shop_id,
            "add_comment",
            lambda: AddComment(
                shop_id=shop_id,
                author=caller,
                author_name=profile.get("name"),
                author_avatar=profile.get("avatar"),
                text=text,
                review=rating,
            ),
        )

    def remove_comment(self, shop_id, comment_id, caller) -> list[dict]:
        return self._dispatch(
            shop_id,
            "remove_comment",
            lambda: RemoveComment(shop_id=shop_id, comment_id=comment_id, requested_by=caller),
        )

    # -------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------
    @staticmethod
    def _check_id(shop_id):
        if not is_object_id(shop_id):
            raise NotFoundError("Shop not found")

    def _dispatch(self, shop_id, action, build_command):
        """Process a freshly built command, again on each version conflict."""
        self._check_id(shop_id)
        for attempt in range(1, self.max_attempts + 1):
            try:
                result = current_domain.process(build_command(), asynchronous=False)
            except ExpectedVersionError:
                self._log_retry(shop_id, action, attempt)
                continue
            logger.info("Shop updated", shop_id=shop_id, action=action, attempt=attempt)
            return result
        self._give_up(shop_id, action)

    def _log_retry(self, shop_id, action, attempt):
        logger.warning(
            "Concurrent write detected, retrying",
            shop_id=shop_id,
            action=action,
            attempt=attempt,
            max_attempts=self.max_attempts,
        )

    def _give_up(self, shop_id, action):
        logger.error("Giving up after concurrent writes", shop_id=shop_id, action=action, attempts=self.max_attempts)
        raise StaleShopError(f"Shop {shop_id} is being modified concurrently, please retry")
