"""The reddit module: call messages, transaction hooks and queries."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from .address import (
    Address,
    PostAddress,
    SubAddress,
    UserAddress,
    get_sub_address,
    get_user_address,
)
from .models import DuplicateEntryError, Post, PostStatus, SubReddit, User

MODULE_NAME = "reddit"


class RedditError(Exception):
    """Raised when a call or query cannot be carried out."""


@dataclass(frozen=True)
class Context:
    """Execution context of a transaction: who sent it."""

    sender: Address


@dataclass(frozen=True)
class CreateUser:
    """Register a username for the sender."""

    username: str


@dataclass(frozen=True)
class CreateSubReddit:
    """Create a subreddit moderated by the sender."""

    user_address: Address
    subname: str
    description: str


@dataclass(frozen=True)
class CreatePost:
    """Publish a post in a subreddit."""

    title: str
    flair: str
    content: str
    subaddress: Address


CallMessage = Union[CreateUser, CreateSubReddit, CreatePost]


@dataclass(frozen=True)
class RedditConfig:
    """Genesis configuration; the module needs none."""


@dataclass(frozen=True)
class UserCollectionResponse:
    """Answer to ``getUser``."""

    username: str
    user_address: UserAddress


@dataclass(frozen=True)
class UserAddressResponse:
    """Answer to ``getUserAddress``."""

    user_address: UserAddress


@dataclass(frozen=True)
class SubRedditCollectionResponse:
    """Answer to ``getSubreddit``."""

    subname: str
    description: str
    subaddress: SubAddress
    mods: Tuple[UserAddress, ...]


@dataclass(frozen=True)
class SubAddressResponse:
    """Answer to ``getSubAddress``."""

    sub_address: SubAddress


@dataclass(frozen=True)
class PostCollectionResponse:
    """Answer to ``getPost``."""

    user_address: UserAddress
    sub_address: SubAddress
    post_address: PostAddress
    post_title: str
    content: str
    flair: str
    status: PostStatus


def _module_address() -> Address:
    return Address(hashlib.sha256(MODULE_NAME.encode("utf-8")).digest())


@dataclass
class Reddit:
    """State and behaviour of the reddit module."""

    address: Address = field(default_factory=_module_address)
    user_collections: Dict[UserAddress, User] = field(default_factory=dict)
    sub_collections: Dict[SubAddress, SubReddit] = field(default_factory=dict)
    post_collections: Dict[PostAddress, Post] = field(default_factory=dict)

    def genesis(self, config: RedditConfig) -> None:
        """Initialise the module; the configuration must be a RedditConfig."""
        if not isinstance(config, RedditConfig):
            raise TypeError(
                f"expected RedditConfig, got {type(config).__name__}"
            )

    def call(self, msg: CallMessage, context: Context) -> None:
        """Apply a call message sent by ``context.sender``."""
        try:
            if isinstance(msg, CreateUser):
                self._create_user(msg.username, context)
            elif isinstance(msg, CreateSubReddit):
                self._create_subreddit(msg.subname, msg.description, context)
            elif isinstance(msg, CreatePost):
                self._create_post(
                    msg.title,
                    msg.flair,
                    msg.content,
                    SubAddress(bytes(msg.subaddress)),
                    context,
                )
            else:
                raise TypeError(f"unsupported call message: {type(msg).__name__}")
        except DuplicateEntryError as exc:
            raise RedditError(str(exc)) from exc

    def _create_user(self, username: str, context: Context) -> None:
        key, user = User.create(username, self.user_collections, context.sender)
        self.user_collections[key] = user

    def _create_subreddit(self, subname: str, description: str, context: Context) -> None:
        key, sub = SubReddit.create(
            subname, description, self.sub_collections, context.sender
        )
        self.sub_collections[key] = sub

    def _create_post(
        self,
        title: str,
        flair: str,
        content: str,
        sub_address: SubAddress,
        context: Context,
    ) -> None:
        key, post = Post.create(title, flair, content, sub_address, context.sender)
        self.post_collections[key] = post

    def pre_dispatch_tx_hook(self, public_key: bytes) -> Address:
        """Resolve the address of the key that signed a transaction."""
        return Address(hashlib.sha256(bytes(public_key)).digest())

    def post_dispatch_tx_hook(self, context: Context) -> None:
        """Run after a transaction; the context must be a Context."""
        if not isinstance(context, Context):
            raise TypeError(f"expected Context, got {type(context).__name__}")

    def get_user(self, user_address: UserAddress) -> UserCollectionResponse:
        """Look up a user by the address it is stored under."""
        key = UserAddress(bytes(user_address))
        try:
            user = self.user_collections[key]
        except KeyError:
            raise RedditError(f"no user at {key}") from None
        return UserCollectionResponse(username=user.username, user_address=key)

    def get_user_address(
        self, user_address: Address, username: str
    ) -> UserAddressResponse:
        """Compute where ``username`` registered by ``user_address`` is stored."""
        return UserAddressResponse(
            user_address=get_user_address(username, bytes(user_address))
        )

    def get_sub_reddit(self, sub_address: SubAddress) -> SubRedditCollectionResponse:
        """Look up a subreddit by its address."""
        key = SubAddress(bytes(sub_address))
        try:
            sub = self.sub_collections[key]
        except KeyError:
            raise RedditError(f"no subreddit at {key}") from None
        return SubRedditCollectionResponse(
            subname=sub.subname,
            description=sub.description,
            subaddress=sub.subaddress,
            mods=tuple(sub.mods),
        )

    def get_sub_address(self, subname: str) -> SubAddressResponse:
        """Compute the address of a subreddit from its name."""
        return SubAddressResponse(sub_address=get_sub_address(subname))

    def get_post(self, post_address: PostAddress) -> PostCollectionResponse:
        """Look up a post by its address."""
        key = PostAddress(bytes(post_address))
        try:
            post = self.post_collections[key]
        except KeyError:
            raise RedditError(f"no post at {key}") from None
        return PostCollectionResponse(
            user_address=post.user_address,
            sub_address=post.subaddress,
            post_address=post.post_address,
            post_title=post.post_title,
            content=post.content,
            flair=post.flair,
            status=post.status,
        )