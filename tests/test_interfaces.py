import socket
from collections import namedtuple

import psutil

from eui64tool import interfaces
from eui64tool.interfaces import NetInterface, find_interface, list_interfaces

Addr = namedtuple("Addr", "family address netmask broadcast ptp")


def _fake_net_if_addrs():
    return {
        "lo": [
            Addr(socket.AF_INET, "127.0.0.1", "255.0.0.0", None, None),
            Addr(psutil.AF_LINK, "00:00:00:00:00:00", None, None, None),
        ],
        "eth0": [
            Addr(socket.AF_INET, "192.168.1.10", "255.255.255.0", None, None),
            Addr(psutil.AF_LINK, "02-42-AC-11-00-02", None, None, None),
        ],
        "tun0": [
            Addr(socket.AF_INET, "10.8.0.2", "255.255.255.0", None, None),
        ],
    }


def test_list_interfaces(monkeypatch):
    monkeypatch.setattr(interfaces.psutil, "net_if_addrs", _fake_net_if_addrs)

    assert list_interfaces() == [
        NetInterface(name="lo", mac=None),
        NetInterface(name="eth0", mac="02:42:ac:11:00:02"),
        NetInterface(name="tun0", mac=None),
    ]


def test_find_interface():
    ifaces = [NetInterface("lo"), NetInterface("eth0", "02:42:ac:11:00:02")]
    assert find_interface(ifaces, "eth0").mac == "02:42:ac:11:00:02"
    assert find_interface(ifaces, "eth1") is None
