from __future__ import annotations

import logging
from dataclasses import dataclass

import psutil

from .conversions import normalize_mac

logger = logging.getLogger(__name__)

_NULL_MAC = "00:00:00:00:00:00"


@dataclass(frozen=True)
class NetInterface:
    name: str
    mac: str | None = None


def _link_address(addrs: list) -> str | None:
    for a in addrs:
        if a.family != psutil.AF_LINK:
            continue
        if not a.address:
            continue
        mac = normalize_mac(a.address)
        # Loopback reports an all-zero hardware address
        if mac == _NULL_MAC:
            continue
        return mac
    return None


def list_interfaces() -> list[NetInterface]:
    """
    Local network interfaces with their hardware address, if any.
    Order follows psutil.
    """
    interfaces = [
        NetInterface(name=name, mac=_link_address(addrs))
        for name, addrs in psutil.net_if_addrs().items()
    ]
    logger.debug(
        "found %d interfaces (%d with a MAC address)",
        len(interfaces),
        sum(1 for i in interfaces if i.mac),
    )
    return interfaces


def find_interface(interfaces: list[NetInterface], name: str) -> NetInterface | None:
    for iface in interfaces:
        if iface.name == name:
            return iface
    return None
