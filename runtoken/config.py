"""Resolve where the token lives and how the server is reached.

Configuration priority (highest to lowest):
  1. Environment variables: RUNTOKEN_FILE, RUNTOKEN_HOST, RUNTOKEN_PORT
  2. Defaults

The token file itself always lives under $XDG_RUNTIME_DIR.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

ENV_XDG_RUNTIME_DIR = "XDG_RUNTIME_DIR"

DEFAULT_TOKEN_NAME = "runtoken/token"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765


class RuntimeDirError(RuntimeError):
    """$XDG_RUNTIME_DIR is not set, so there is nowhere safe to put the token."""


def get_runtime_dir() -> str:
    runtime_dir = os.environ.get(ENV_XDG_RUNTIME_DIR)
    if not runtime_dir:
        raise RuntimeDirError(f"{ENV_XDG_RUNTIME_DIR} is not set")
    return runtime_dir


def get_token_file_path(fp_token: str) -> str:
    """Default resolver: join the runtime directory with the token identifier.

    A leading separator on the identifier does not reset the join, so an
    absolute identifier still lands under the runtime directory.
    """
    return os.path.normpath(os.path.join(get_runtime_dir(), fp_token.lstrip(os.sep)))


def _ensure_private_dir(path: Path):
    """Create ``path`` and any missing parents, each with mode 0700."""
    missing = []
    while not path.exists():
        missing.append(path)
        if path.parent == path:
            break
        path = path.parent
    for p in reversed(missing):
        p.mkdir(mode=0o700, exist_ok=True)


def _write_private_file(path: Path, content: str):
    """Write a file with owner-only permissions (0600), replacing its contents."""
    fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    try:
        # O_CREAT's mode is ignored when the file already exists
        os.fchmod(fd, 0o600)
        os.write(fd, content.encode("utf-8"))
    finally:
        os.close(fd)


def read_token(
    fp_token: str,
    token_file_path: Callable[[str], str] = get_token_file_path,
) -> str:
    """Read the token text back, as a co-located client would."""
    return Path(token_file_path(fp_token)).read_text(encoding="utf-8")


def get_token_name() -> str:
    return os.environ.get("RUNTOKEN_FILE") or DEFAULT_TOKEN_NAME


def get_host() -> str:
    return os.environ.get("RUNTOKEN_HOST") or DEFAULT_HOST


def get_port() -> int:
    env_port = os.environ.get("RUNTOKEN_PORT")
    if env_port:
        return int(env_port)
    return DEFAULT_PORT
