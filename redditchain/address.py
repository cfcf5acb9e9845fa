"""Typed 32-byte addresses and the hashing rules that derive them."""

from __future__ import annotations

import hashlib
import uuid
from dataclasses import dataclass
from typing import Union

ADDRESS_LENGTH = 32

BytesLike = Union[bytes, bytearray, memoryview, "Address"]


@dataclass(frozen=True)
class Address:
    """A 32-byte account address."""

    value: bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, int):
            raise TypeError("address value must be bytes, not int")
        raw = bytes(self.value)
        if len(raw) != ADDRESS_LENGTH:
            raise ValueError(
                f"address must be {ADDRESS_LENGTH} bytes long, got {len(raw)}"
            )
        object.__setattr__(self, "value", raw)

    @classmethod
    def from_hex(cls, text: str) -> "Address":
        """Parse an address from hex text, with or without a 0x prefix."""
        digits = text[2:] if text.lower().startswith("0x") else text
        try:
            raw = bytes.fromhex(digits)
        except ValueError as exc:
            raise ValueError(f"invalid hex address: {text!r}") from exc
        return cls(raw)

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return "0x" + self.value.hex()


class UserAddress(Address):
    """Address of a user."""


class SubAddress(Address):
    """Address of a subreddit."""


class PostAddress(Address):
    """Address of a post."""


class CommentAddress(Address):
    """Address of a comment."""


def _digest(*parts: bytes) -> bytes:
    hasher = hashlib.sha256()
    for part in parts:
        hasher.update(part)
    return hasher.digest()


def get_user_address(name: str, sender: BytesLike) -> UserAddress:
    """Derive a user's address from the sender and the username."""
    return UserAddress(_digest(bytes(sender), name.encode("utf-8")))


def get_sub_address(subname: str) -> SubAddress:
    """Derive a subreddit's address from its name."""
    return SubAddress(_digest(subname.encode("utf-8")))


def get_post_address(user_address: BytesLike, sub_address: BytesLike) -> PostAddress:
    """Derive a fresh, random post address for a user posting in a subreddit."""
    return PostAddress(
        _digest(bytes(user_address), bytes(sub_address), uuid.uuid4().bytes)
    )