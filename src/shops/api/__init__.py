"""Shops domain API package."""

from shops.api.routes import shop_router

__all__ = ["shop_router"]
