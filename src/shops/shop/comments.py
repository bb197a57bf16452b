"""CommentLedger: the ordered, newest-first comment collection of a shop.

Comments are plain documents embedded in the shop record:

    {"id", "text", "review", "author", "name", "avatar", "date"}

``name`` and ``avatar`` are a snapshot of the author's profile when the
comment was written. ``id``, ``author`` and ``date`` never change.
"""

import math
from datetime import UTC, datetime

from shops.shared.errors import AuthorizationError, NotFoundError, ValidationError
from shops.shared.object_id import new_object_id


def parse_review(value) -> float:
    """Parse a rating into a finite float.

    Accepts ints, floats and numeric strings. Booleans, blanks, NaN and
    infinities are rejected with a ValidationError.
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError({"review": ["Review must be a number"]})

    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise ValidationError({"review": ["Review is required"]})

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError({"review": ["Review must be a number"]}) from None

    if not math.isfinite(number):
        raise ValidationError({"review": ["Review must be a finite number"]})
    return number


class CommentLedger:
    """Pure operations over a sequence of comment documents."""

    @staticmethod
    def find(comments, comment_id):
        return next((c for c in comments if c["id"] == comment_id), None)

    @staticmethod
    def add(comments, author_user, author_profile, text, review) -> list[dict]:
        """Return a new sequence with a freshly built comment prepended."""
        if text is None or not str(text).strip():
            raise ValidationError({"text": ["Text is required"]})
        rating = parse_review(review)

        profile = author_profile or {}
        existing_ids = {c["id"] for c in comments}
        comment_id = new_object_id()
        while comment_id in existing_ids:
            comment_id = new_object_id()

        comment = {
            "id": comment_id,
            "text": str(text),
            "review": rating,
            "author": str(author_user),
            "name": profile.get("name"),
            "avatar": profile.get("avatar"),
            "date": datetime.now(UTC).isoformat(),
        }
        return [comment, *comments]

    @classmethod
    def remove(cls, comments, comment_id, caller) -> list[dict]:
        """Return a new sequence without ``comment_id``, others kept in order.

        Only the author may remove a comment.
        """
        comment = cls.find(comments, comment_id)
        if comment is None:
            raise NotFoundError("Comment does not exist")
        if comment["author"] != str(caller):
            raise AuthorizationError()
        return [c for c in comments if c["id"] != comment_id]
