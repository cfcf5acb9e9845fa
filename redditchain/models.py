"""Users, subreddits and posts stored by the module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Tuple

from .address import (
    Address,
    PostAddress,
    SubAddress,
    UserAddress,
    get_post_address,
    get_sub_address,
    get_user_address,
)


class DuplicateEntryError(Exception):
    """Raised when an entry with the same key already exists."""


class PostStatus(str, Enum):
    """Lifecycle state of a post."""

    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    DELETED = "DELETED"

    @classmethod
    def _missing_(cls, value):
        raise ValueError(f"Unknown status: {value}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class User:
    """A registered user."""

    username: str
    karma: int
    user_address: UserAddress

    @classmethod
    def create(
        cls,
        username: str,
        user_collections: Mapping[UserAddress, "User"],
        sender: Address,
    ) -> Tuple[UserAddress, "User"]:
        """Make a new user for ``sender``; fail if the name is already taken."""
        key = get_user_address(username, bytes(sender))
        if key in user_collections:
            raise DuplicateEntryError(f"User with username={username} already exists")
        return key, cls(username=username, karma=0, user_address=UserAddress(bytes(sender)))


@dataclass(frozen=True)
class SubReddit:
    """A community, moderated initially by its creator."""

    subaddress: SubAddress
    subname: str
    description: str
    mods: Tuple[UserAddress, ...]

    @classmethod
    def create(
        cls,
        subname: str,
        description: str,
        sub_collections: Mapping[SubAddress, "SubReddit"],
        sender: Address,
    ) -> Tuple[SubAddress, "SubReddit"]:
        """Make a new subreddit; fail if the name is already taken."""
        key = get_sub_address(subname)
        if key in sub_collections:
            raise DuplicateEntryError(f"Subreddit with subname={subname} already exists")
        return key, cls(
            subaddress=key,
            subname=subname,
            description=description,
            mods=(UserAddress(bytes(sender)),),
        )


@dataclass(frozen=True)
class Post:
    """A post in a subreddit."""

    post_address: PostAddress
    user_address: UserAddress
    subaddress: SubAddress
    post_title: str
    flair: str
    content: str
    status: PostStatus

    @classmethod
    def create(
        cls,
        title: str,
        flair: str,
        content: str,
        sub_address: SubAddress,
        sender: Address,
    ) -> Tuple[PostAddress, "Post"]:
        """Make a new active post by ``sender`` under a fresh address."""
        key = get_post_address(bytes(sender), bytes(sub_address))
        return key, cls(
            post_address=key,
            user_address=UserAddress(bytes(sender)),
            subaddress=sub_address,
            post_title=title,
            flair=flair,
            content=content,
            status=PostStatus.ACTIVE,
        )