"""LikeSet: the unique-per-user like relation of a shop.

Likes are kept newest first. Order is for display only; uniqueness is the
invariant.
"""

from shops.shared.errors import ConflictError


class LikeSet:
    """Pure operations over a sequence of user identifiers."""

    @staticmethod
    def contains(likes, user) -> bool:
        return str(user) in (str(u) for u in likes)

    @classmethod
    def add(cls, likes, user) -> list[str]:
        """Return a new sequence with ``user`` prepended.

        Raises ConflictError if ``user`` already liked the shop.
        """
        if cls.contains(likes, user):
            raise ConflictError("Shop already liked")
        return [str(user), *likes]

    @classmethod
    def remove(cls, likes, user) -> list[str]:
        """Return a new sequence without ``user``.

        Raises ConflictError if ``user`` has not liked the shop.
        """
        if not cls.contains(likes, user):
            raise ConflictError("Shop has not yet been liked")
        return [u for u in likes if str(u) != str(user)]
