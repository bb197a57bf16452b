"""Domain events for the Shop aggregate.

All events are versioned, immutable facts representing state changes.
"""

from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from shops.domain import shops


@shops.event(part_of="Shop")
class ShopRegistered:
    """A user registered a new shop and became its owner."""

    __version__ = "v1"

    shop_id = Identifier(required=True)
    owner_user = Identifier(required=True)
    name = String()
    suburb = String()
    registered_at = DateTime(required=True)


@shops.event(part_of="Shop")
class ShopLiked:
    __version__ = "v1"

    shop_id = Identifier(required=True)
    user = Identifier(required=True)
    like_count = Integer(required=True)
    liked_at = DateTime(required=True)


@shops.event(part_of="Shop")
class ShopUnliked:
    __version__ = "v1"

    shop_id = Identifier(required=True)
    user = Identifier(required=True)
    like_count = Integer(required=True)
    unliked_at = DateTime(required=True)


@shops.event(part_of="Shop")
class CommentAdded:
    """A user commented on a shop with a rating."""

    __version__ = "v1"

    shop_id = Identifier(required=True)
    comment_id = Identifier(required=True)
    author = Identifier(required=True)
    text = Text(required=True)
    review = Float(required=True)
    average_review = Float(required=True)
    total_review = Integer(required=True)
    added_at = DateTime(required=True)


@shops.event(part_of="Shop")
class CommentRemoved:
    """The author removed their comment; the rating was recomputed."""

    __version__ = "v1"

    shop_id = Identifier(required=True)
    comment_id = Identifier(required=True)
    author = Identifier(required=True)
    average_review = Float(required=True)
    total_review = Integer(required=True)
    removed_at = DateTime(required=True)
