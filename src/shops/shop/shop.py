"""Shop aggregate: a reviewable venue with embedded likes and comments.

The shop document is the unit of consistency. Likes and comments live inside
it as JSON arrays (newest first), and the rating fields are derived from the
comments on every comment change. Concurrent writers are detected through
the aggregate's ``_version``, checked by Protean when the shop is saved.
"""

import json
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.fields import DateTime, Float, Identifier, Integer, String, Text

from shops.domain import shops
from shops.shared.errors import AuthorizationError, ValidationError
from shops.shared.object_id import new_object_id
from shops.shop.comments import CommentLedger
from shops.shop.events import (
    CommentAdded,
    CommentRemoved,
    ShopLiked,
    ShopRegistered,
    ShopUnliked,
)
from shops.shop.likes import LikeSet
from shops.shop.ratings import ReviewAggregator


@shops.aggregate
class Shop:
    """A venue registered by ``owner_user``."""

    id = Identifier(identifier=True)

    # Content
    name = String(max_length=200)
    text = Text(required=True)
    address = String(max_length=500)
    suburb = String(max_length=200)
    avatar = String(max_length=1000)

    owner_user = Identifier(required=True)

    likes = Text(default="[]")  # JSON: [user_id, ...], newest first
    comments = Text(default="[]")  # JSON: [{id, text, review, author, name, avatar, date}, ...]

    # Derived from comments
    average_review = Float(default=0.0)
    total_review = Integer(default=0)

    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Embedded collections
    # -------------------------------------------------------------------
    @property
    def like_list(self) -> list[str]:
        return json.loads(self.likes) if self.likes else []

    @property
    def comment_list(self) -> list[dict]:
        return json.loads(self.comments) if self.comments else []

    # -------------------------------------------------------------------
    # Invariants
    # -------------------------------------------------------------------
    @invariant.post
    def a_user_likes_at_most_once(self):
        likes = self.like_list
        if len(set(likes)) != len(likes):
            raise ValidationError({"likes": ["A user can like a shop only once"]})

    @invariant.post
    def comment_ids_are_unique(self):
        ids = [c["id"] for c in self.comment_list]
        if len(set(ids)) != len(ids):
            raise ValidationError({"comments": ["Comment identifiers must be unique"]})

    @invariant.post
    def rating_matches_comments(self):
        total, average = ReviewAggregator.recompute(self.comment_list)
        if self.total_review != total or self.average_review != average:
            raise ValidationError({"average_review": ["Rating is out of sync with comments"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def register(cls, owner_user, text, name=None, address=None, suburb=None, avatar=None):
        """Register a new shop owned by ``owner_user``."""
        if text is None or not str(text).strip():
            raise ValidationError({"text": ["Text is required"]})

        now = datetime.now(UTC)
        shop = cls(
            id=new_object_id(),
            name=name,
            text=text,
            address=address,
            suburb=suburb,
            avatar=avatar,
            owner_user=owner_user,
            likes=json.dumps([]),
            comments=json.dumps([]),
            average_review=0.0,
            total_review=0,
            created_at=now,
            updated_at=now,
        )

        shop.raise_(
            ShopRegistered(
                shop_id=str(shop.id),
                owner_user=str(owner_user),
                name=name,
                suburb=suburb,
                registered_at=now,
            )
        )
        return shop

    # -------------------------------------------------------------------
    # Ownership
    # -------------------------------------------------------------------
    def ensure_owned_by(self, user):
        if str(self.owner_user) != str(user):
            raise AuthorizationError()

    # -------------------------------------------------------------------
    # Likes
    # -------------------------------------------------------------------
    def like(self, user):
        """Record a like by ``user``. Cannot like twice."""
        likes = LikeSet.add(self.like_list, user)
        now = datetime.now(UTC)

        with atomic_change(self):
            self.likes = json.dumps(likes)
            self.updated_at = now

        self.raise_(ShopLiked(shop_id=str(self.id), user=str(user), like_count=len(likes), liked_at=now))

    def unlike(self, user):
        """Withdraw the like of ``user``. Cannot unlike without a like."""
        likes = LikeSet.remove(self.like_list, user)
        now = datetime.now(UTC)

        with atomic_change(self):
            self.likes = json.dumps(likes)
            self.updated_at = now

        self.raise_(ShopUnliked(shop_id=str(self.id), user=str(user), like_count=len(likes), unliked_at=now))

    # -------------------------------------------------------------------
    # Comments
    # -------------------------------------------------------------------
    def _replace_comments(self, comments, now):
        total, average = ReviewAggregator.recompute(comments)
        with atomic_change(self):
            self.comments = json.dumps(comments)
            self.total_review = total
            self.average_review = average
            self.updated_at = now

    def add_comment(self, author, profile, text, review) -> dict:
        """Add a rated comment by ``author`` and recompute the rating."""
        comments = CommentLedger.add(self.comment_list, author, profile, text, review)
        comment = comments[0]
        now = datetime.now(UTC)
        self._replace_comments(comments, now)

        self.raise_(
            CommentAdded(
                shop_id=str(self.id),
                comment_id=comment["id"],
                author=comment["author"],
                text=comment["text"],
                review=comment["review"],
                average_review=self.average_review,
                total_review=self.total_review,
                added_at=now,
            )
        )
        return comment

    def remove_comment(self, comment_id, caller):
        """Remove a comment. Only its author may do so."""
        comments = CommentLedger.remove(self.comment_list, comment_id, caller)
        now = datetime.now(UTC)
        self._replace_comments(comments, now)

        self.raise_(
            CommentRemoved(
                shop_id=str(self.id),
                comment_id=comment_id,
                author=str(caller),
                average_review=self.average_review,
                total_review=self.total_review,
                removed_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Ratings
    # -------------------------------------------------------------------
    def refresh_ratings(self):
        """Recompute the rating fields in memory from the current comments."""
        total, average = ReviewAggregator.recompute(self.comment_list)
        if (total, average) != (self.total_review, self.average_review):
            with atomic_change(self):
                self.total_review = total
                self.average_review = average
