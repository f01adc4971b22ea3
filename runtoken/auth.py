"""Shared-secret token auth for local services.

One process calls ``AuthToken.init()`` to generate the token and write it
under $XDG_RUNTIME_DIR. Co-located clients read that file and present the
token back, which ``AuthToken.check()`` verifies in constant time.
"""
from __future__ import annotations

import asyncio
import base64
import hashlib
import logging
import secrets
from pathlib import Path
from typing import Callable

from .config import _ensure_private_dir, _write_private_file, get_token_file_path

logger = logging.getLogger(__name__)

# 64 bytes, 512 bits of random data per token
RANDOM_BYTES = 64


def generate_token() -> str:
    """Return base64(sha256(64 random bytes)), always 44 characters."""
    data = secrets.token_bytes(RANDOM_BYTES)
    digest = hashlib.sha256(data).digest()
    return base64.b64encode(digest).decode("ascii")


def timing_safe_equal(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without an early exit.

    Both inputs are padded to the longer length and every position is
    visited. A length difference is folded into the result, so padding can
    never produce a false match.
    """
    n = max(len(a), len(b))
    diff = len(a) ^ len(b)
    for x, y in zip(a.ljust(n, b"\x00"), b.ljust(n, b"\x00")):
        diff |= x ^ y
    return diff == 0


def _noop(t: str):
    pass


class AuthToken:
    """Generate, persist and verify a single token.

    Calls to ``init()`` must be serialized by the caller. ``check()`` is safe
    to call concurrently once ``init()`` has returned.
    """

    def __init__(
        self,
        fp_token: str,
        logi: Callable[[str], None] = _noop,
        token_file_path: Callable[[str], str] = get_token_file_path,
    ):
        """
        Args:
            fp_token: token file identifier, passed to ``token_file_path``
            logi: called once per ``init()`` with the resolved path
            token_file_path: maps ``fp_token`` to a full path
        """
        self._token = b""
        self._fp_token = fp_token
        self._logi = logi
        self._token_file_path = token_file_path

    @property
    def ready(self) -> bool:
        return bool(self._token)

    async def init(self):
        """Generate a new token and write it to the token file.

        The in-memory token is replaced before the file is written, so an
        OSError from the write still leaves ``check()`` usable.
        """
        token_file = Path(self._token_file_path(self._fp_token))
        try:
            self._logi(" token: " + str(token_file))
        except Exception:
            logger.exception("Token log callback failed")

        token = generate_token()
        self._token = token.encode("utf-8")

        await asyncio.to_thread(_ensure_private_dir, token_file.parent)
        await asyncio.to_thread(_write_private_file, token_file, token)
        logger.debug(f"Wrote token file {token_file}")

    def check(self, t: str) -> bool:
        """Return True if ``t`` matches the current token. Always False before init()."""
        if not self._token:
            return False
        return timing_safe_equal(t.encode("utf-8", "surrogatepass"), self._token)
