"""Tests for ShopStore likes and comments."""

import math

import pytest
from protean.exceptions import ValidationError
from shops.shared.errors import AuthorizationError, ConflictError, NotFoundError
from shops.shared.object_id import new_object_id
from shops.shop.store import ShopStore

OWNER = "5f8d0d55b54764421b7156c3"
ALICE = "5f8d0d55b54764421b7156c4"
BOB = "5f8d0d55b54764421b7156c5"
ALICE_PROFILE = {"name": "Alice", "avatar": "https://cdn.example.com/alice.png"}
BOB_PROFILE = {"name": "Bob", "avatar": "https://cdn.example.com/bob.png"}


@pytest.fixture()
def store():
    return ShopStore()


@pytest.fixture()
def shop_id(store):
    return store.create(OWNER, {"text": "Dumplings", "name": "Steam"}).id


class TestLikes:
    def test_like_returns_likes(self, store, shop_id):
        assert store.like(shop_id, ALICE) == [ALICE]
        assert store.like(shop_id, BOB) == [BOB, ALICE]
        assert store.get_by_id(shop_id).like_list == [BOB, ALICE]

    def test_double_like_rejected(self, store, shop_id):
        store.like(shop_id, ALICE)
        with pytest.raises(ConflictError) as exc:
            store.like(shop_id, ALICE)
        assert exc.value.message == "Shop already liked"
        assert store.get_by_id(shop_id).like_list == [ALICE]

    def test_unlike(self, store, shop_id):
        store.like(shop_id, ALICE)
        store.like(shop_id, BOB)
        assert store.unlike(shop_id, ALICE) == [BOB]

    def test_unlike_without_like_rejected(self, store, shop_id):
        with pytest.raises(ConflictError) as exc:
            store.unlike(shop_id, ALICE)
        assert exc.value.message == "Shop has not yet been liked"

    def test_like_missing_shop(self, store):
        with pytest.raises(NotFoundError):
            store.like(new_object_id(), ALICE)

    def test_like_malformed_id(self, store):
        with pytest.raises(NotFoundError):
            store.like("12345", ALICE)

    def test_each_write_bumps_version(self, store, shop_id):
        store.like(shop_id, ALICE)
        store.unlike(shop_id, ALICE)
        store.like(shop_id, BOB)
        assert store.get_by_id(shop_id)._version == 3

    def test_rejected_write_does_not_bump_version(self, store, shop_id):
        with pytest.raises(ConflictError):
            store.unlike(shop_id, ALICE)
        assert store.get_by_id(shop_id)._version == 0


class TestComments:
    def test_add_comment_returns_all_comments(self, store, shop_id):
        store.add_comment(shop_id, ALICE, ALICE_PROFILE, "Juicy", 4)
        comments = store.add_comment(shop_id, BOB, BOB_PROFILE, "Salty", 5)
        assert [c["author"] for c in comments] == [BOB, ALICE]
        assert comments[0]["name"] == "Bob"
        assert comments[0]["avatar"] == BOB_PROFILE["avatar"]

    def test_add_comment_updates_ratings(self, store, shop_id):
        store.add_comment(shop_id, ALICE, ALICE_PROFILE, "Juicy", 4)
        store.add_comment(shop_id, BOB, BOB_PROFILE, "Salty", 5)
        shop = store.get_by_id(shop_id)
        assert shop.total_review == 2
        assert shop.average_review == 4.5

    def test_invalid_comment_leaves_shop_untouched(self, store, shop_id):
        with pytest.raises(ValidationError):
            store.add_comment(shop_id, ALICE, ALICE_PROFILE, "", 4)
        with pytest.raises(ValidationError):
            store.add_comment(shop_id, ALICE, ALICE_PROFILE, "Fine", "five")
        shop = store.get_by_id(shop_id)
        assert shop.comment_list == []
        assert shop._version == 0

    def test_remove_comment(self, store, shop_id):
        store.add_comment(shop_id, ALICE, ALICE_PROFILE, "First", 1)
        store.add_comment(shop_id, BOB, BOB_PROFILE, "Second", 2)
        comments = store.add_comment(shop_id, ALICE, ALICE_PROFILE, "Third", 2)
        middle = comments[1]

        remaining = store.remove_comment(shop_id, middle["id"], BOB)
        assert [c["text"] for c in remaining] == ["Third", "First"]
        shop = store.get_by_id(shop_id)
        assert shop.total_review == 2
        assert shop.average_review == 1.5

    def test_remove_comment_by_other_user_rejected(self, store, shop_id):
        comments = store.add_comment(shop_id, ALICE, ALICE_PROFILE, "Mine", 3)
        with pytest.raises(AuthorizationError):
            store.remove_comment(shop_id, comments[0]["id"], BOB)
        with pytest.raises(AuthorizationError):
            store.remove_comment(shop_id, comments[0]["id"], OWNER)
        assert len(store.get_by_id(shop_id).comment_list) == 1

    def test_remove_unknown_comment(self, store, shop_id):
        with pytest.raises(NotFoundError) as exc:
            store.remove_comment(shop_id, new_object_id(), ALICE)
        assert exc.value.message == "Comment does not exist"

    def test_remove_comment_on_missing_shop(self, store):
        with pytest.raises(NotFoundError) as exc:
            store.remove_comment(new_object_id(), new_object_id(), ALICE)
        assert exc.value.message == "Shop not found"

    def test_last_comment_removed_resets_ratings(self, store, shop_id):
        comments = store.add_comment(shop_id, ALICE, ALICE_PROFILE, "Only", 5)
        store.remove_comment(shop_id, comments[0]["id"], ALICE)
        shop = store.get_by_id(shop_id)
        assert (shop.total_review, shop.average_review) == (0, 0.0)

    def test_likes_and_comments_are_independent(self, store, shop_id):
        store.like(shop_id, ALICE)
        store.add_comment(shop_id, BOB, BOB_PROFILE, "Nice", 4)
        store.unlike(shop_id, ALICE)
        shop = store.get_by_id(shop_id)
        assert shop.like_list == []
        assert len(shop.comment_list) == 1


class TestExtremeReviews:
    def test_huge_reviews_keep_rating_finite(self, store, shop_id):
        store.add_comment(shop_id, ALICE, ALICE_PROFILE, "Off the charts", 1e308)
        store.add_comment(shop_id, BOB, BOB_PROFILE, "Me too", "1e308")
        shop = store.get_by_id(shop_id)
        assert shop.total_review == 2
        assert math.isfinite(shop.average_review)
        assert shop.average_review == 1e308
