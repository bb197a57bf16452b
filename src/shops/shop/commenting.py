"""AddComment / RemoveComment: rated comments on a shop.

Anyone may comment; only the author may remove their comment. The shop's
rating is recomputed by the aggregate on every change.
"""

from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from shops.domain import shops
from shops.shop.shop import Shop


@shops.command(part_of="Shop")
class AddComment:
    shop_id = Identifier(required=True)
    author = Identifier(required=True)
    author_name = String(max_length=200)
    author_avatar = String(max_length=1000)
    text = Text()  # required, checked by CommentLedger
    review = Float(required=True)


@shops.command(part_of="Shop")
class RemoveComment:
    shop_id = Identifier(required=True)
    comment_id = Identifier(required=True)
    requested_by = Identifier(required=True)


@shops.command_handler(part_of=Shop)
class ShopCommentsHandler:
    @handle(AddComment)
    def add_comment(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.load(command.shop_id)
        shop.add_comment(
            command.author,
            {"name": command.author_name, "avatar": command.author_avatar},
            command.text,
            command.review,
        )
        repo.save(shop)
        return shop.comment_list

    @handle(RemoveComment)
    def remove_comment(self, command):
        repo = current_domain.repository_for(Shop)
        shop = repo.load(command.shop_id)
        shop.remove_comment(command.comment_id, command.requested_by)
        repo.save(shop)
        return shop.comment_list
