from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from .classifier import InputKind, classify
from .config import Config
from .conversions import extract_suffix, from_eui64, to_eui64
from .errors import ConversionError, Eui64ToolError, InvalidInputError, MissingMacAddressError
from .interfaces import NetInterface, find_interface, list_interfaces
from .logging_config import setup_logging
from .options import handle_flag

logger = logging.getLogger(__name__)


def _make_console(stderr: bool = False) -> Console:
    # emoji off: MAC groups like ":ab:" are emoji codes
    return Console(stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


def _print_suffix(console: Console, label: str, mac: str) -> None:
    console.print(f"IPv6 EUI-64 suffix for {escape(label)}: {to_eui64(mac)}")


def _print_mac(console: Console, address: str) -> None:
    try:
        mac = from_eui64(extract_suffix(address))
    except ConversionError as e:
        # Same error kind, reworded to echo what the user typed
        raise type(e)(f"'{address}' is not a valid EUI-64 address: {e}") from e
    console.print(f"MAC address for {escape(address)}: {mac}")


def _handle_token(
    token: str,
    interfaces: list[NetInterface],
    console: Console,
    config: Config,
) -> None:
    c = classify(token, {i.name for i in interfaces})

    if c.kind is InputKind.FLAG:
        handle_flag(token, console, config)
    elif c.kind is InputKind.INTERFACE:
        iface = find_interface(interfaces, token)
        if iface is None or iface.mac is None:
            raise MissingMacAddressError(token)
        _print_suffix(console, iface.name, iface.mac)
    elif c.kind is InputKind.MAC_ADDRESS:
        _print_suffix(console, token, token)
    elif c.kind in (InputKind.IPV6_ADDRESS, InputKind.EUI64_SUFFIX):
        _print_mac(console, token)
    else:
        raise InvalidInputError(token)


def run(
    tokens: Sequence[str],
    interfaces: list[NetInterface],
    console: Console | None = None,
    err_console: Console | None = None,
    config: Config | None = None,
) -> int:
    """
    Classify and convert each token in order.

    A failing token is reported on stderr and does not stop the tokens after
    it. Returns 1 if any token failed, else 0.
    """
    console = console or _make_console()
    err_console = err_console or _make_console(stderr=True)
    config = config or Config()

    if not tokens:
        # No input: every interface that has a MAC
        for iface in interfaces:
            if not iface.mac:
                continue
            try:
                _print_suffix(console, iface.name, iface.mac)
            except ConversionError as e:
                # e.g. 20-byte InfiniBand hardware addresses
                logger.warning("skipping %s: %s", iface.name, e)
        return 0

    failed = 0
    for token in tokens:
        try:
            _handle_token(token, interfaces, console, config)
        except Eui64ToolError as e:
            logger.info("token %r failed: %s", token, type(e).__name__)
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            failed += 1

    return 1 if failed else 0


def main(argv: Sequence[str] | None = None) -> None:
    config = Config()
    setup_logging(config.log_level)

    tokens = list(sys.argv[1:] if argv is None else argv)
    try:
        code = run(tokens, list_interfaces(), config=config)
        raise SystemExit(code)
    except KeyboardInterrupt:
        raise SystemExit(2)
    except Exception as e:
        _make_console(stderr=True).print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(2)


if __name__ == "__main__":
    main()
