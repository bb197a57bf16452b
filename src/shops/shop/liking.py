"""LikeShop / UnlikeShop: toggle the caller's like on a shop.

A user likes a shop at most once and can only unlike a shop they liked.
"""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from shops.domain import shops
from shops.shop.shop import Shop


@shops.command(part_of="Shop")
class LikeShop:
    shop_id = Identifier(required=True)
    user = Identifier(required=True)


@shops.command(part_of="Shop")
class UnlikeShop:
    shop_id = Identifier(required=True)
    user = Identifier(required=True)


@shops.command_handler(part_of=Shop)
class ShopLikesHandler:
    @handle(LikeShop)
    def like_shop(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.load(command.shop_id)
        shop.like(command.user)
        repo.save(shop)
        return shop.like_list

    @handle(UnlikeShop)
    def unlike_shop(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.load(command.shop_id)
        shop.unlike(command.user)
        repo.save(shop)
        return shop.like_list
