import pytest

from redditchain.address import (
    Address,
    CommentAddress,
    PostAddress,
    SubAddress,
    UserAddress,
    get_post_address,
    get_sub_address,
    get_user_address,
)

SENDER = bytes(range(32))


def test_address_requires_32_bytes():
    with pytest.raises(ValueError):
        Address(b"\x01" * 31)


def test_address_rejects_int():
    with pytest.raises(TypeError):
        Address(32)


def test_address_accepts_bytearray():
    address = Address(bytearray(b"\x07" * 32))
    assert address.value == b"\x07" * 32


def test_hex_round_trip():
    address = UserAddress(SENDER)
    parsed = UserAddress.from_hex(str(address))
    assert parsed == address
    assert str(address).startswith("0x")


def test_from_hex_without_prefix():
    assert Address.from_hex(SENDER.hex()).value == SENDER


def test_from_hex_rejects_garbage():
    with pytest.raises(ValueError):
        Address.from_hex("0xnothex")


def test_typed_addresses_are_distinct():
    assert UserAddress(SENDER) == UserAddress(SENDER)
    assert (UserAddress(SENDER) == SubAddress(SENDER)) is False
    assert (PostAddress(SENDER) == CommentAddress(SENDER)) is False


def test_bytes_conversion():
    assert bytes(SubAddress(SENDER)) == SENDER


def test_user_address_is_deterministic():
    first = get_user_address("alice", SENDER)
    second = get_user_address("alice", SENDER)
    assert first == second
    assert isinstance(first, UserAddress)
    assert len(first.value) == 32


def test_user_address_depends_on_name_and_sender():
    base = get_user_address("alice", SENDER)
    assert (get_user_address("bob", SENDER) == base) is False
    assert (get_user_address("alice", b"\xff" * 32) == base) is False


def test_user_address_accepts_address_sender():
    assert get_user_address("alice", Address(SENDER)) == get_user_address("alice", SENDER)


def test_sub_address_is_deterministic_per_name():
    assert get_sub_address("python") == get_sub_address("python")
    assert (get_sub_address("python") == get_sub_address("rust")) is False
    assert isinstance(get_sub_address("python"), SubAddress)


def test_post_addresses_are_unique():
    sub = get_sub_address("python")
    addresses = {get_post_address(SENDER, sub) for _ in range(20)}
    assert len(addresses) == 20
    assert all(isinstance(a, PostAddress) for a in addresses)