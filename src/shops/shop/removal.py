"""DeleteShop: the owner removes their shop.

The delete only goes through if nobody wrote the shop since the ownership
check was made.
"""

from protean.fields import Identifier
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from shops.domain import shops
from shops.shop.shop import Shop


@shops.command(part_of="Shop")
class DeleteShop:
    shop_id = Identifier(required=True)
    requested_by = Identifier(required=True)


@shops.command_handler(part_of=Shop)
class DeleteShopHandler:
    @handle(DeleteShop)
    def delete_shop(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.load(command.shop_id)
        shop.ensure_owned_by(command.requested_by)
        repo.remove_if_current(shop)
