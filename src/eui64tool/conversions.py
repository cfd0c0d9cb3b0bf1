from __future__ import annotations

import re

from .errors import ConversionError, MalformedEui64Error, MissingEui64MarkerError

_OCTET = re.compile(r"^[0-9a-f]{2}$")
_GROUP = re.compile(r"^[0-9a-f]{4}$")


def normalize_mac(mac: str) -> str:
    # OS-reported MACs can be dash separated (Windows) or uppercase
    return mac.strip().replace("-", ":").lower()


def flip_universal_local(octet: str) -> str:
    """
    Toggle the universal/local bit (0x02) of a 2-digit hex octet.
    """
    try:
        value = int(octet, 16)
    except ValueError:
        raise ConversionError(f"'{octet}' is not a hex octet") from None
    if not 0 <= value <= 0xFF:
        raise ConversionError(f"'{octet}' is not a hex octet")
    return f"{value ^ 0x02:02x}"


def to_eui64(mac: str) -> str:
    """
    MAC address -> modified EUI-64 suffix.

    02:42:ac:11:00:02 -> :0042:acff:fe11:0002
    """
    octets = mac.lower().split(":")
    if len(octets) != 6 or not all(_OCTET.match(o) for o in octets):
        raise ConversionError(f"'{mac}' is not a MAC address")

    octets[0] = flip_universal_local(octets[0])

    groups = [
        octets[0] + octets[1],
        octets[2] + "ff",
        "fe" + octets[3],
        octets[4] + octets[5],
    ]
    return ":" + ":".join(groups)


def from_eui64(suffix: str) -> str:
    """
    Modified EUI-64 suffix -> MAC address.

    :0042:acff:fe11:0002 -> 02:42:ac:11:00:02

    Raises MalformedEui64Error for anything that is not a leading colon
    followed by 4 groups of 4 hex digits, and MissingEui64MarkerError when
    the ff:fe bytes are not in the middle.
    """
    segments = suffix.lower().split(":")
    if len(segments) != 5 or segments[0] != "":
        raise MalformedEui64Error(f"'{suffix}' does not have 4 groups after the leading colon")

    groups = segments[1:]
    if not all(_GROUP.match(g) for g in groups):
        raise MalformedEui64Error(f"'{suffix}' groups must be 4 hex digits each")

    octets: list[str] = []
    for group in groups:
        octets.append(group[0:2])
        octets.append(group[2:4])

    if octets[3] != "ff" or octets[4] != "fe":
        raise MissingEui64MarkerError("missing ff:fe marker")
    del octets[3:5]

    octets[0] = flip_universal_local(octets[0])
    return ":".join(octets)


def expand_ipv6(address: str) -> str:
    """
    Expand a '::' zero run so the address has all 8 groups.

    2001:db8::1 -> 2001:db8:0:0:0:0:0:1
    """
    if "::" not in address:
        return address

    parts = address.split("::")
    if len(parts) != 2:
        raise ConversionError(f"'{address}' has more than one '::'")

    left = parts[0].split(":") if parts[0] else []
    right = parts[1].split(":") if parts[1] else []

    zeros_needed = 8 - (len(left) + len(right))
    if zeros_needed < 1:
        raise ConversionError(f"'{address}' has too many groups for '::'")

    return ":".join(left + ["0"] * zeros_needed + right)


def extract_suffix(address: str) -> str:
    """
    Candidate EUI-64 suffix from a full IPv6 address or a bare suffix.

    Groups are left-padded to 4 digits. The result still has to pass
    from_eui64's marker check.
    """
    if address.startswith(":"):
        # bare suffix, nothing to expand
        groups = address.split(":")[1:]
    else:
        groups = expand_ipv6(address).split(":")[-4:]
        if len(groups) < 4:
            raise MalformedEui64Error(f"'{address}' has fewer than 4 groups")

    return ":" + ":".join(g.rjust(4, "0") for g in groups)
