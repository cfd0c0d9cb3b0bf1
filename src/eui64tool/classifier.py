from __future__ import annotations

import logging
import re
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

MAC_PATTERN = re.compile(r"^([0-9a-f]{2}:){5}[0-9a-f]{2}$", re.IGNORECASE)
EUI64_SUFFIX_PATTERN = re.compile(r"^:([0-9a-f]{4}:){3}[0-9a-f]{4}$", re.IGNORECASE)
IPV6_PATTERN = re.compile(r"^([0-9a-f]{0,4}:){2,7}[0-9a-f]{0,4}$", re.IGNORECASE)


class InputKind(Enum):
    INTERFACE = "interface"
    MAC_ADDRESS = "mac_address"
    IPV6_ADDRESS = "ipv6_address"
    EUI64_SUFFIX = "eui64_suffix"
    FLAG = "flag"
    INVALID = "invalid"


@dataclass(frozen=True)
class Classification:
    token: str
    kind: InputKind


def _kind_of(token: str, known_names: Collection[str]) -> InputKind:
    # First match wins; flags and interface names shadow address shapes
    if token.startswith("-"):
        return InputKind.FLAG
    if token in known_names:
        return InputKind.INTERFACE
    if MAC_PATTERN.fullmatch(token):
        return InputKind.MAC_ADDRESS
    if EUI64_SUFFIX_PATTERN.fullmatch(token):
        return InputKind.EUI64_SUFFIX
    if IPV6_PATTERN.fullmatch(token):
        return InputKind.IPV6_ADDRESS
    return InputKind.INVALID


def classify(token: str, known_names: Collection[str]) -> Classification:
    """
    Decide what a single command-line token is.

    Every token gets exactly one kind:
      flag > interface name > MAC > EUI-64 suffix > IPv6 address > invalid
    """
    kind = _kind_of(token, known_names)
    logger.debug("classified %r as %s", token, kind.value)
    return Classification(token=token, kind=kind)
