"""Application tests for the Shop command handlers."""

import pytest
from protean import current_domain
from protean.exceptions import ExpectedVersionError, ValidationError
from shops.shared.errors import AuthorizationError, ConflictError, NotFoundError
from shops.shop.commenting import AddComment, RemoveComment
from shops.shop.liking import LikeShop, UnlikeShop
from shops.shop.registration import RegisterShop
from shops.shop.removal import DeleteShop
from shops.shop.shop import Shop

OWNER = "5f8d0d55b54764421b7156c3"
ALICE = "5f8d0d55b54764421b7156c4"


def _register_shop(**overrides):
    defaults = {"owner_user": OWNER, "text": "Bagels all day", "name": "Hole Story"}
    defaults.update(overrides)
    return current_domain.process(RegisterShop(**defaults), asynchronous=False)


def _shop(shop_id):
    return current_domain.repository_for(Shop).get(shop_id)


class TestRegisterShopCommand:
    def test_register_persists_shop(self):
        shop_id = _register_shop()
        shop = _shop(shop_id)
        assert shop.name == "Hole Story"
        assert str(shop.owner_user) == OWNER
        assert shop._version == 0

    def test_register_returns_shop_id(self):
        assert isinstance(_register_shop(), str)

    def test_text_required(self):
        with pytest.raises(ValidationError) as exc:
            _register_shop(text=None)
        assert "Text is required" in str(exc.value)


class TestLikeCommands:
    def test_like_persists_and_returns_likes(self):
        shop_id = _register_shop()
        likes = current_domain.process(LikeShop(shop_id=shop_id, user=ALICE), asynchronous=False)
        assert likes == [ALICE]
        assert _shop(shop_id).like_list == [ALICE]
        assert _shop(shop_id)._version == 1

    def test_unlike_without_like_rejected(self):
        shop_id = _register_shop()
        with pytest.raises(ConflictError):
            current_domain.process(UnlikeShop(shop_id=shop_id, user=ALICE), asynchronous=False)

    def test_unknown_shop(self):
        with pytest.raises(NotFoundError):
            current_domain.process(LikeShop(shop_id="0" * 24, user=ALICE), asynchronous=False)


class TestCommentCommands:
    def test_add_and_remove(self):
        shop_id = _register_shop()
        comments = current_domain.process(
            AddComment(shop_id=shop_id, author=ALICE, author_name="Alice", text="Chewy", review=4.0),
            asynchronous=False,
        )
        assert comments[0]["name"] == "Alice"
        assert _shop(shop_id).average_review == 4.0

        remaining = current_domain.process(
            RemoveComment(shop_id=shop_id, comment_id=comments[0]["id"], requested_by=ALICE),
            asynchronous=False,
        )
        assert remaining == []
        assert _shop(shop_id).total_review == 0

    def test_remove_by_other_user_rejected(self):
        shop_id = _register_shop()
        comments = current_domain.process(
            AddComment(shop_id=shop_id, author=ALICE, text="Chewy", review=4.0),
            asynchronous=False,
        )
        with pytest.raises(AuthorizationError):
            current_domain.process(
                RemoveComment(shop_id=shop_id, comment_id=comments[0]["id"], requested_by=OWNER),
                asynchronous=False,
            )


class TestDeleteShopCommand:
    def test_owner_deletes(self):
        shop_id = _register_shop()
        current_domain.process(DeleteShop(shop_id=shop_id, requested_by=OWNER), asynchronous=False)
        with pytest.raises(NotFoundError):
            current_domain.repository_for(Shop).load(shop_id)

    def test_non_owner_rejected(self):
        shop_id = _register_shop()
        with pytest.raises(AuthorizationError):
            current_domain.process(DeleteShop(shop_id=shop_id, requested_by=ALICE), asynchronous=False)

    def test_stale_delete_rejected(self):
        shop_id = _register_shop()
        repo = current_domain.repository_for(Shop)
        stale = repo.get(shop_id)
        current_domain.process(LikeShop(shop_id=shop_id, user=ALICE), asynchronous=False)

        with pytest.raises(ExpectedVersionError):
            repo.remove_if_current(stale)
        assert repo.get(shop_id).like_list == [ALICE]
