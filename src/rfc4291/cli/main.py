"""CLI entry point for rfc4291.

Subcommands:
    parse      Print addresses in canonical (or another configured) form.
    info       Show every representation and classification of an address.
    pack       Print the 16-byte binary form of an address as hex.
    unpack     Decode 16 bytes of hex into the canonical form.
"""

from __future__ import annotations

import argparse
import json
import sys

from rfc4291.address import IPv6Address
from rfc4291.config import OUTPUT_FORMATS, Config
from rfc4291.errors import BinaryLengthError, ParseError


def _load_config(args: argparse.Namespace) -> Config:
    """Load config, handling errors."""
    from rfc4291.config import load_config

    config_path = getattr(args, "config", None)
    try:
        return load_config(config_path)
    except FileNotFoundError:
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        print(f"Error: invalid config {config_path}: {e}", file=sys.stderr)
        sys.exit(1)


def _read_address(text: str, config: Config) -> IPv6Address:
    if config.input.strip:
        text = text.strip()
    return IPv6Address.parse(text)


def render(address: IPv6Address, fmt: str) -> str:
    """Render address in one of the configured output formats.

    >>> render(IPv6Address.parse('2001:db8::1'), 'hex')
    '20010db8000000000000000000000001'
    """
    if fmt == "compressed":
        return str(address)
    if fmt == "exploded":
        return address.exploded
    if fmt == "hex":
        return address.to_bytes().hex()
    if fmt == "json":
        from rfc4291.structured import encode
        return json.dumps(encode(address))
    if fmt == "ptr":
        return address.reverse_pointer
    raise ValueError(f"Unknown output format: {fmt!r}")


# ---------------------------------------------------------------------------
# Subcommand: parse
# ---------------------------------------------------------------------------

def cmd_parse(args: argparse.Namespace) -> int:
    """Print each address argument in the chosen format."""
    config = _load_config(args)
    fmt = args.format or config.output.format

    failed = 0
    for text in args.addresses:
        try:
            address = _read_address(text, config)
        except ParseError as e:
            print(f"Error: {e}", file=sys.stderr)
            failed += 1
            continue
        print(render(address, fmt))

    return 1 if failed else 0


# ---------------------------------------------------------------------------
# Subcommand: info
# ---------------------------------------------------------------------------

def cmd_info(args: argparse.Namespace) -> int:
    """Show all representations and classifications of one address."""
    config = _load_config(args)
    try:
        address = _read_address(args.address, config)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Canonical:  {address}")
    print(f"Exploded:   {address.exploded}")
    print(f"Segments:   {' '.join(f'{s:04x}' for s in address.segments)}")
    print(f"Packed:     {address.to_bytes().hex()}")
    print(f"Integer:    {int(address)}")
    print(f"PTR:        {address.reverse_pointer}")
    print()
    flags = [
        ("unspecified", address.is_unspecified),
        ("loopback", address.is_loopback),
        ("multicast", address.is_multicast),
        ("link-local", address.is_link_local),
        ("unique-local", address.is_unique_local),
        ("global-unicast", address.is_global_unicast),
    ]
    for name, value in flags:
        print(f"  {name:16s} {'yes' if value else 'no'}")
    return 0


# ---------------------------------------------------------------------------
# Subcommands: pack / unpack
# ---------------------------------------------------------------------------

def cmd_pack(args: argparse.Namespace) -> int:
    """Print the binary form of an address as hex."""
    config = _load_config(args)
    try:
        address = _read_address(args.address, config)
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(address.to_bytes().hex())
    return 0


def cmd_unpack(args: argparse.Namespace) -> int:
    """Decode a hex-encoded binary address."""
    config = _load_config(args)
    text = args.hex.strip() if config.input.strip else args.hex
    try:
        data = bytes.fromhex(text)
    except ValueError:
        print(f"Error: not a hex string: {args.hex!r}", file=sys.stderr)
        return 1
    try:
        address = IPv6Address.from_bytes(data)
    except BinaryLengthError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(render(address, config.output.format))
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="rfc4291",
        description="Parse, canonicalise and encode IPv6 addresses.",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to rfc4291.toml (default: ./rfc4291.toml if present)",
    )

    subparsers = parser.add_subparsers(dest="command")

    # parse
    parse_parser = subparsers.add_parser("parse", help="Print addresses in canonical form")
    parse_parser.add_argument("addresses", nargs="+", help="IPv6 addresses to parse")
    parse_parser.add_argument(
        "-f", "--format", choices=OUTPUT_FORMATS,
        help="Output format (default: from config, else compressed)",
    )

    # info
    info_parser = subparsers.add_parser("info", help="Show address details")
    info_parser.add_argument("address", help="IPv6 address")

    # pack
    pack_parser = subparsers.add_parser("pack", help="Print 16-byte binary form as hex")
    pack_parser.add_argument("address", help="IPv6 address")

    # unpack
    unpack_parser = subparsers.add_parser("unpack", help="Decode hex binary form")
    unpack_parser.add_argument("hex", help="32 hex digits (16 bytes)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "parse": cmd_parse,
        "info": cmd_info,
        "pack": cmd_pack,
        "unpack": cmd_unpack,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
