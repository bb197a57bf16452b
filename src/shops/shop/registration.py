"""RegisterShop: a user registers a shop and becomes its owner."""

from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from shops.domain import shops
from shops.shop.shop import Shop


@shops.command(part_of="Shop")
class RegisterShop:
    owner_user = Identifier(required=True)
    text = Text()  # required, checked by Shop.register
    name = String(max_length=200)
    address = String(max_length=500)
    suburb = String(max_length=200)
    avatar = String(max_length=1000)


@shops.command_handler(part_of=Shop)
class RegisterShopHandler:
    @handle(RegisterShop)
    def register_shop(self, command):
        shop = Shop.register(
            owner_user=command.owner_user,
            text=command.text,
            name=command.name,
            address=command.address,
            suburb=command.suburb,
            avatar=command.avatar,
        )
        current_domain.repository_for(Shop).add(shop)
        return str(shop.id)
