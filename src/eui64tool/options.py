from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from .config import Config

HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-v", "--version")

USAGE = "%(prog)s [options] [ifname] [mac_address] [ipv6_eui64_address] [ipv6_eui64_suffix]"


def build_parser(config: Config) -> argparse.ArgumentParser:
    """
    Describes the command line for --help. Tokens are not parsed with it:
    flags are classified in place alongside the other inputs.
    """
    p = argparse.ArgumentParser(prog=config.prog, usage=USAGE, add_help=False)
    p.add_argument(
        "input",
        nargs="*",
        help="interface name, MAC address, IPv6 EUI-64 address or :xxxx:xxxx:xxxx:xxxx suffix",
    )

    opts = p.add_argument_group("options")
    opts.add_argument(*HELP_FLAGS, action="store_true", help="Show this help page")
    opts.add_argument(*VERSION_FLAGS, action="store_true", help="Show version number and information")
    return p


def handle_flag(flag: str, console: Console, config: Config | None = None) -> None:
    """
    Print help or version text. An unknown option is reported on stdout
    and otherwise ignored.
    """
    config = config or Config()

    if flag in HELP_FLAGS:
        console.print(escape(build_parser(config).format_help().rstrip()))
        return

    if flag in VERSION_FLAGS:
        console.print(escape(f"EUI-64 intelligent conversion tool ({config.version})"))
        console.print(escape(config.author))
        return

    console.print(f"[red]Error:[/red] unknown option -- {escape(flag)}")
