"""runtoken CLI — run the token-guarded server and hand the token to clients.

Usage:
  runtoken serve              Start the server (generates a fresh token)
  runtoken path               Print the token file path
  runtoken token              Print the current token for a client
  runtoken config             Show current configuration
  runtoken version            Show version
"""
from __future__ import annotations

import argparse
import sys

from . import __version__
from .config import (
    ENV_XDG_RUNTIME_DIR, RuntimeDirError,
    get_host, get_port, get_token_file_path, get_token_name, read_token,
)

# ---------- Colors ----------

RED = "\033[0;31m"
BOLD = "\033[1m"
DIM = "\033[2m"
NC = "\033[0m"


def _fail(msg: str):
    print(f"  {RED}✗{NC} {msg}", file=sys.stderr)


def _resolve_path(name: str) -> str:
    try:
        return get_token_file_path(name)
    except RuntimeDirError:
        _fail(f"{ENV_XDG_RUNTIME_DIR} is not set, cannot locate the token file")
        sys.exit(1)


def cmd_serve(args):
    """Start the uvicorn server (blocking)."""
    # Fail before uvicorn starts rather than inside the lifespan hook
    _resolve_path(get_token_name())

    import uvicorn
    uvicorn.run(
        "runtoken.server:app",
        host=get_host(),
        port=get_port(),
    )


def cmd_path(args):
    """Print the token file path."""
    print(_resolve_path(args.name))


def cmd_token(args):
    """Print the token so a co-located client can present it."""
    path = _resolve_path(args.name)
    try:
        token = read_token(args.name)
    except FileNotFoundError:
        _fail(f"No token file at {path} (is the server running?)")
        sys.exit(1)
    print(token)


def cmd_config(args):
    """Show current configuration."""
    name = get_token_name()
    try:
        token_file = get_token_file_path(name)
    except RuntimeDirError:
        token_file = f"(unset {ENV_XDG_RUNTIME_DIR})"

    print()
    print(f"  {BOLD}runtoken Configuration{NC}")
    print(f"  {'─' * 50}")
    print()
    print(f"  {DIM}Token name:{NC}   {name}")
    print(f"  {DIM}Token file:{NC}   {token_file}")
    print(f"  {DIM}Host:{NC}         {get_host()}")
    print(f"  {DIM}Port:{NC}         {get_port()}")
    print()


def cmd_version(args):
    """Show version."""
    print(f"runtoken {__version__}")


# ---------- Main ----------

def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="runtoken",
        description="runtoken — shared-secret token auth for local services",
    )
    subparsers = parser.add_subparsers(dest="command")

    # serve
    p_serve = subparsers.add_parser("serve", help="Start the server")
    p_serve.set_defaults(func=cmd_serve)

    # path
    p_path = subparsers.add_parser("path", help="Print the token file path")
    p_path.add_argument("--name", default=get_token_name(), help="Token file identifier")
    p_path.set_defaults(func=cmd_path)

    # token
    p_token = subparsers.add_parser("token", help="Print the current token")
    p_token.add_argument("--name", default=get_token_name(), help="Token file identifier")
    p_token.set_defaults(func=cmd_token)

    # config
    p_config = subparsers.add_parser("config", help="Show current configuration")
    p_config.set_defaults(func=cmd_config)

    # version
    p_version = subparsers.add_parser("version", help="Show version")
    p_version.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
