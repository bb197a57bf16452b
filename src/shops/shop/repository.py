"""Repository for the Shop aggregate.

Lost updates are caught by Protean's own aggregate versioning: every shop
carries ``_version`` and ``add`` raises ``ExpectedVersionError`` when the
persisted version moved on since the shop was read. ``remove_if_current``
applies the same check to deletes.
"""

from contextlib import contextmanager

import structlog
from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ValidationError

from shops.domain import shops
from shops.shared.errors import AuthorizationError, ConflictError, NotFoundError, StoreError
from shops.shop.shop import Shop

logger = structlog.get_logger(__name__)

_PAGE_SIZE = 100


@contextmanager
def _store_call(operation, **context):
    """Wrap unexpected provider failures into StoreError."""
    try:
        yield
    except (ObjectNotFoundError, ValidationError, ConflictError, AuthorizationError, ExpectedVersionError):
        raise
    except Exception as exc:
        logger.error("Shop store operation failed", operation=operation, error=str(exc), **context)
        raise StoreError(f"Shop store {operation} failed") from exc


@shops.repository(part_of=Shop)
class ShopRepository:
    def load(self, shop_id) -> Shop:
        """Fetch a shop, raising NotFoundError when it does not exist."""
        with _store_call("load", shop_id=shop_id):
            try:
                return self.get(shop_id)
            except ObjectNotFoundError:
                raise NotFoundError("Shop not found") from None

    def all_shops(self) -> list[Shop]:
        results = []
        offset = 0
        with _store_call("list"):
            while True:
                page = self._dao.query.order_by("id").offset(offset).limit(_PAGE_SIZE).all().items
                results.extend(page)
                if len(page) < _PAGE_SIZE:
                    return results
                offset += _PAGE_SIZE

    def save(self, shop: Shop) -> Shop:
        """Persist ``shop``. A stale copy raises ExpectedVersionError."""
        with _store_call("save", shop_id=shop.id):
            try:
                return self.add(shop)
            except ObjectNotFoundError:
                raise NotFoundError("Shop not found") from None

    def remove_if_current(self, shop: Shop) -> None:
        """Delete ``shop`` only if its persisted version is the one that was read."""
        with _store_call("remove", shop_id=shop.id):
            try:
                persisted = self._dao.get(shop.id)
            except ObjectNotFoundError:
                raise NotFoundError("Shop not found") from None

            if persisted._version != shop._version:
                raise ExpectedVersionError(
                    f"Wrong expected version: {shop._version} (Shop {shop.id}, Version: {persisted._version})"
                )
            self._dao.delete(shop)
