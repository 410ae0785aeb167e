"""Conversions between host and network (big-endian) byte order."""

import sys


def _to_network(value: int, size: int) -> int:
    value &= (1 << (8 * size)) - 1
    return int.from_bytes(value.to_bytes(size, "big"), sys.byteorder)


def _to_host(value: int, size: int) -> int:
    value &= (1 << (8 * size)) - 1
    return int.from_bytes(value.to_bytes(size, sys.byteorder), "big")


def host_to_network64(host64: int) -> int:
    return _to_network(host64, 8)


def host_to_network32(host32: int) -> int:
    return _to_network(host32, 4)


def host_to_network16(host16: int) -> int:
    return _to_network(host16, 2)


def network_to_host64(net64: int) -> int:
    return _to_host(net64, 8)


def network_to_host32(net32: int) -> int:
    return _to_host(net32, 4)


def network_to_host16(net16: int) -> int:
    return _to_host(net16, 2)