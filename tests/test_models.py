import pytest

from redditchain.address import (
    Address,
    PostAddress,
    UserAddress,
    get_sub_address,
    get_user_address,
)
from redditchain.models import DuplicateEntryError, Post, PostStatus, SubReddit, User

SENDER = Address(b"\x11" * 32)


def test_post_status_parse():
    assert PostStatus("ARCHIVED") is PostStatus.ARCHIVED
    with pytest.raises(ValueError, match="Unknown status: HIDDEN"):
        PostStatus("HIDDEN")


def test_create_user():
    key, user = User.create("alice", {}, SENDER)
    assert key == get_user_address("alice", bytes(SENDER))
    assert user.username == "alice"
    assert user.karma == 0
    assert user.user_address == UserAddress(bytes(SENDER))


def test_duplicate_user_rejected():
    key, user = User.create("alice", {}, SENDER)
    with pytest.raises(DuplicateEntryError, match="username=alice already exists"):
        User.create("alice", {key: user}, SENDER)


def test_same_name_other_sender_allowed():
    key, user = User.create("alice", {}, SENDER)
    other_key, _ = User.create("alice", {key: user}, Address(b"\x22" * 32))
    assert (other_key == key) is False


def test_create_subreddit():
    key, sub = SubReddit.create("python", "snakes", {}, SENDER)
    assert key == get_sub_address("python")
    assert sub.subaddress == key
    assert sub.description == "snakes"
    assert sub.mods == (UserAddress(bytes(SENDER)),)


def test_duplicate_subreddit_rejected():
    key, sub = SubReddit.create("python", "snakes", {}, SENDER)
    with pytest.raises(DuplicateEntryError, match="subname=python already exists"):
        SubReddit.create("python", "other", {key: sub}, Address(b"\x22" * 32))


def test_create_post():
    sub_key = get_sub_address("python")
    key, post = Post.create("Hello", "news", "body text", sub_key, SENDER)
    assert isinstance(key, PostAddress)
    assert post.post_address == key
    assert post.subaddress == sub_key
    assert post.user_address == UserAddress(bytes(SENDER))
    assert post.status == "ACTIVE"
    assert (post.post_title, post.flair, post.content) == ("Hello", "news", "body text")


def test_posts_get_distinct_addresses():
    sub_key = get_sub_address("python")
    first, _ = Post.create("a", "f", "c", sub_key, SENDER)
    second, _ = Post.create("a", "f", "c", sub_key, SENDER)
    assert (first == second) is False