import pytest

from ledgenet.network.address import Address


def test_from_octets_packs_big_endian():
    addr = Address.from_octets(127, 0, 0, 1, 50000)
    assert addr.address == 0x7F000001
    assert addr.port == 50000


def test_octets_round_trip():
    addr = Address.from_octets(192, 168, 4, 77, 1234)
    assert (addr.a, addr.b, addr.c, addr.d) == (192, 168, 4, 77)


def test_str():
    assert str(Address.from_octets(127, 0, 0, 1, 50000)) == "127.0.0.1:50000"


def test_to_sockaddr():
    assert Address.from_octets(10, 1, 2, 3, 8080).to_sockaddr() == ("10.1.2.3", 8080)


def test_sockaddr_round_trip():
    addr = Address.from_octets(172, 16, 9, 200, 40000)
    assert Address.from_sockaddr(addr.to_sockaddr()) == addr


def test_equality_needs_address_and_port():
    assert Address.from_octets(1, 2, 3, 4, 5) == Address.from_octets(1, 2, 3, 4, 5)
    assert Address.from_octets(1, 2, 3, 4, 5) != Address.from_octets(1, 2, 3, 4, 6)


def test_default_is_zero():
    addr = Address()
    assert (addr.address, addr.port) == (0, 0)


@pytest.mark.parametrize(
    "args",
    [(256, 0, 0, 1, 80), (1, 2, 3, -1, 80), (1, 2, 3, 4, 70000)],
)
def test_out_of_range_values_rejected(args):
    with pytest.raises(ValueError):
        Address.from_octets(*args)


def test_addresses_are_hashable():
    addr = Address.from_octets(8, 8, 4, 4, 53)
    assert {addr: "dns"}[Address.from_octets(8, 8, 4, 4, 53)] == "dns"